"""Registry of special forms for the risp evaluator.

Maps names to handler functions that receive the interpreter and the raw,
unevaluated argument nodes. ``register`` binds them into an environment as
SpecialForm values, so they are looked up like any other name.
"""

from risp.evaluation.special_forms.set_form import set_form
from risp.evaluation.special_forms.list_form import list_form
from risp.evaluation.special_forms.block_form import block_form
from risp.evaluation.special_forms.if_form import if_form
from risp.evaluation.special_forms.while_form import while_form
from risp.types.environment import Environment
from risp.types.values import SpecialForm

SPECIAL_FORMS = {
    "set": set_form,
    "list": list_form,
    "block": block_form,
    "if": if_form,
    "while": while_form,
}


def register(env: Environment) -> None:
    """Bind every special form into `env`."""
    env.update({name: SpecialForm(name, fn) for name, fn in SPECIAL_FORMS.items()})
