"""Route handlers for the web console."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from action_console.actions.action import Action
from action_console.actions.flags import Flag
from action_console.actions.manager import ActionManager
from action_console.actions.types import (
    ParamDef,
    ParamType,
    Preformatted,
    ValidationStatus,
    with_status,
)
from action_console.web.context import ConsoleContext

router = APIRouter()

# Form field names
ACTION_INPUT = "action-name"
CONFIRMATION_INPUT = "action-confirmation"
PARAM_INPUT_PREFIX = "action-param-"


def param_input_name(param: ParamDef) -> str:
    return f"{PARAM_INPUT_PREFIX}{param.name}"


@dataclass
class ActionCard:
    """Everything the template shows for one action."""

    action: Action
    location: str
    status: ValidationStatus
    flags: list[Flag] = field(default_factory=list)
    code: str | None = None

    @property
    def form_id(self) -> str:
        return f"action-form-{self.action.name}"

    @property
    def has_body(self) -> bool:
        return bool(self.action.parameters) or self.action.risky or self.status.is_invalid


def build_card(manager: ActionManager, action: Action) -> ActionCard:
    status = manager.validator.validate(action)
    return ActionCard(
        action=action,
        location=action.location,
        status=status,
        flags=manager.flags.resolve_all(action),
        # Only offered forms show a code
        code=manager.confirmation.code_for(action)
        if action.risky and status.is_valid
        else None,
    )


def execute_submission(
    manager: ActionManager,
    name: str,
    form: Mapping[str, Any],
) -> list[Preformatted]:
    """
    Run a submitted action form.

    Checks, in order: the action exists, the confirmation code matches,
    the signature is binder-supportable. The first failing check yields a
    single "Validation" entry and the action does not run.

    Args:
        manager: The action manager
        name: Submitted action name
        form: Submitted form fields

    Returns:
        Result entries, never empty
    """
    action = manager.registry.resolve(name)
    if action is None:
        return [Preformatted(title="Validation", body=f"Action not found: {name}")]

    submitted_code = form.get(CONFIRMATION_INPUT)
    if not manager.confirmation.is_confirmed(action, submitted_code):
        return [Preformatted(title="Validation", body="Invalid confirmation code")]

    status = manager.validator.validate(action)
    if status.is_invalid:
        return [Preformatted(title="Validation", body=status.message)]

    values = {param.name: form.get(param_input_name(param)) for param in action.parameters}
    arguments = manager.binder.bind(action, values)

    return with_status(manager.handle(action, arguments))


def _context(request: Request) -> ConsoleContext:
    return ConsoleContext.from_request(request, request.app.state.settings.dark_mode_cookie)


@router.get("/", response_class=HTMLResponse, name="show_console")
async def show_console(request: Request):
    """Show all actions and the results of the last submission."""
    manager: ActionManager = request.app.state.manager
    context = _context(request)

    cards = [build_card(manager, action) for action in manager.registry.resolve_all()]

    return request.app.state.templates.TemplateResponse(
        request,
        "console.html",
        {
            "cards": cards,
            "results": context.pop_results(),
            "theme": context.theme,
            "dark_mode_cookie": request.app.state.settings.dark_mode_cookie,
            "action_input": ACTION_INPUT,
            "confirmation_input": CONFIRMATION_INPUT,
            "param_input_name": param_input_name,
            "ParamType": ParamType,
        },
    )


@router.post("/", name="run_action")
async def run_action(request: Request):
    """Run a submitted action, then redirect back to its card."""
    manager: ActionManager = request.app.state.manager
    context = _context(request)

    form = await request.form()
    name = str(form.get(ACTION_INPUT, ""))

    context.store_results(execute_submission(manager, name, form))

    url = f"{request.url_for('show_console')}#{quote(name)}"
    return RedirectResponse(url=url, status_code=303)
