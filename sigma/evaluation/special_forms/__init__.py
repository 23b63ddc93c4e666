"""Registry of special forms for the Sigma evaluator.

Maps head names to handler functions. The evaluator tries the heads in
insertion order and dispatches on the first literal prefix match, so the
order of this table is part of the language.
"""

from sigma.evaluation.special_forms.arithmetic_forms import add_form, mult_form, div_form
from sigma.evaluation.special_forms.eq_form import eq_form
from sigma.evaluation.special_forms.let_form import let_form
from sigma.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    "add": add_form,
    "mult": mult_form,
    "div": div_form,
    "eq": eq_form,
    "let": let_form,
    "print": print_form,
}
