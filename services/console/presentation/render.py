"""Plain-text rendering of the user management view."""

from __future__ import annotations

from services.console.application.view import ViewState
from showcase.validation import sanitize_input


def _render_form(state: ViewState) -> list[str]:
    title = "Edit User" if state.editing else "Create New User"
    lines = [f"## {title}"]
    for field_name, label in (("name", "Name"), ("email", "Email")):
        value = getattr(state.form, field_name)
        lines.append(f"{label}: {sanitize_input(value)}")
        error = state.form.errors.get(field_name)
        if error:
            lines.append(f"  ! {error}")
    actions = "[Update User]" if state.editing else "[Create User]"
    if state.editing:
        actions += " [Cancel]"
    lines.append(actions)
    return lines


def _render_list(state: ViewState) -> list[str]:
    lines = [f"## Users ({len(state.users)})"]
    if state.loading:
        lines.append("Loading users...")
        return lines
    if not state.users:
        lines.append("No users found")
        return lines
    selected_id = state.selected_user.id if state.selected_user else None
    for user in state.users:
        marker = ">" if user.id == selected_id else " "
        name = sanitize_input(user.name)
        email = sanitize_input(user.email)
        line = f"{marker} #{user.id} {name} <{email}>"
        if user.id == state.pending_delete_id:
            line += "  (delete? confirm/cancel)"
        lines.append(line)
    return lines


def render_view(state: ViewState) -> str:
    lines = ["# User Management"]
    if state.error:
        lines.append(f"[error] {sanitize_input(state.error)}")
    lines.append("")
    lines.extend(_render_form(state))
    lines.append("")
    lines.extend(_render_list(state))
    return "\n".join(lines)
