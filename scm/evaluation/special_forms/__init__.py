"""Registry of special forms for the scm evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application. Each
handler receives the unevaluated operands, the current environment and the
evaluator to recurse with.
"""

from types import MappingProxyType

from scm.types.symbol import Symbol
from scm.evaluation.special_forms.quote_form import quote_form
from scm.evaluation.special_forms.if_form import if_form
from scm.evaluation.special_forms.set_form import set_form
from scm.evaluation.special_forms.define_form import define_form
from scm.evaluation.special_forms.lambda_form import lambda_form
from scm.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = MappingProxyType({
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
})
