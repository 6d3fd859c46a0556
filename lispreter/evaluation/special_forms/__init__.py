"""Registry of special forms for the Lispreter evaluator.

Maps upper-cased head names to handler functions that implement
non-standard evaluation rules. The evaluator consults this table before
user functions and primitives.
"""

from lispreter.evaluation.special_forms.quote_form import quote_form
from lispreter.evaluation.special_forms.cond_form import cond_form
from lispreter.evaluation.special_forms.defun_form import defun_form
from lispreter.evaluation.special_forms.lambda_form import lambda_form, is_lambda_form
from lispreter.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "QUOTE": quote_form,
    "COND": cond_form,
    "DEFUN": defun_form,
    "LAMBDA": lambda_form,
    "Λ": lambda_form,
    "LET": let_form,
}

__all__ = ["SPECIAL_FORMS", "is_lambda_form"]
