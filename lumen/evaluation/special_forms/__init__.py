"""Evaluation rules for Lumen's compound constructs.

Each handler takes the node, the current Environment and the evaluator
function used for sub-expressions. The evaluator dispatches to them by
matching on the node type.
"""

from lumen.evaluation.special_forms.call_form import call_form
from lumen.evaluation.special_forms.if_form import if_form
from lumen.evaluation.special_forms.lambda_form import lambda_form
from lumen.evaluation.special_forms.let_form import let_form
from lumen.evaluation.special_forms.logic_forms import and_form, or_form, binary_form
from lumen.evaluation.special_forms.progn_form import progn_form
from lumen.evaluation.special_forms.set_form import set_form

__all__ = [
    "and_form",
    "binary_form",
    "call_form",
    "if_form",
    "lambda_form",
    "let_form",
    "or_form",
    "progn_form",
    "set_form",
]
