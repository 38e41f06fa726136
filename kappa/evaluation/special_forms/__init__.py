"""Registry of special forms for the kappa evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application. Each
handler receives the whole form so it can report it in BadSpecialForm.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.quote_form import quote_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.set_form import set_form
from kappa.evaluation.special_forms.define_form import define_form
from kappa.evaluation.special_forms.lambda_form import lambda_form
from kappa.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("load"): load_form,
}
