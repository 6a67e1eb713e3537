"""
admin-forms Demo - Schema-driven forms in the browser

This Gradio app renders the built-in schemas as forms:
1. The sign-in form, pre-filled from the remembered login
2. The listener edit form, grouped by its form sections
3. Validation output for every submission
"""

import gradio as gr

from admin_forms import FieldDefinition, FormData, get_schemas, setup_logging
from admin_forms.config import get_config
from admin_forms.session_store import remember_login, seed_login_form


def create_widget(definition: FieldDefinition, form: FormData):
    """Create the Gradio component matching a field's widget type."""
    binding = form.binding(definition.id)
    label = definition.label or definition.id
    widget = definition.ui_widget()
    value = binding.value

    if widget == "checkbox":
        return gr.Checkbox(label=label, info=definition.help, value=value == "true")
    if widget in ("select", "multiselect"):
        choices = [(text, option) for option, text in binding.options()]
        return gr.Dropdown(
            label=label,
            info=definition.help,
            choices=choices,
            value=value,
            multiselect=widget == "multiselect",
        )
    if widget == "list":
        return gr.Textbox(
            label=label,
            info=(definition.help or "") + " (one per line)",
            value="\n".join(value or []),
            lines=3,
        )
    return gr.Textbox(
        label=label,
        info=definition.help,
        placeholder=definition.placeholder,
        value=value or "",
        type="password" if widget == "password" else "text",
    )


def widget_value(definition: FieldDefinition, value):
    """Convert a component value back to the raw form of the field."""
    if definition.ui_widget() == "list":
        return [line for line in (value or "").splitlines() if line.strip()]
    return value


def render_result(form: FormData) -> tuple[str, dict]:
    result = form.result()
    if result.is_valid:
        return "## ✅ Valid", result.validated_data or {}
    lines = ["## ❌ Please fix the following fields", ""]
    for error in result.errors:
        label = form.schema.field(error.field_name).label or error.field_name
        position = f" (item {error.index + 1})" if error.index is not None else ""
        lines.append(f"- **{label}**{position}: {error.message}")
    return "\n".join(lines), result.model_dump(mode="json")


def submit_form(name: str, definitions: list[FieldDefinition], values: tuple) -> FormData:
    form = get_schemas().build_form(name)
    for definition, value in zip(definitions, values):
        form.set(definition.id, widget_value(definition, value))
    form.validate_form()
    return form


def build_login_tab() -> None:
    schema = get_schemas()["login"]
    form = seed_login_form(get_schemas().build_form("login"))

    with gr.Row():
        with gr.Column(scale=1):
            inputs = [create_widget(definition, form) for definition in schema.fields]
            remember = gr.Checkbox(label="Remember me", value=bool(form.value("login")))
            sign_in = gr.Button("Sign in", variant="primary", size="lg")
        with gr.Column(scale=1):
            status = gr.Markdown()
            details = gr.JSON(label="Result")

    def on_sign_in(*values):
        *field_values, remember_me = values
        submitted = submit_form("login", list(schema.fields), field_values)
        if submitted.result().is_valid:
            remember_login(submitted, remember_me)
        return render_result(submitted)

    sign_in.click(fn=on_sign_in, inputs=inputs + [remember], outputs=[status, details])


def build_schema_tab(name: str) -> None:
    schema = get_schemas()[name]
    form = get_schemas().build_form(name)
    definitions: list[FieldDefinition] = []
    inputs = []

    gr.Markdown(f"### {schema.list_view.title or schema.plural}\n{schema.list_view.subtitle or ''}")
    with gr.Row():
        with gr.Column(scale=2):
            for section in schema.sections:
                with gr.Accordion(section.title or "", open=section is schema.sections[0]):
                    for definition in schema.section_fields(section):
                        definitions.append(definition)
                        inputs.append(create_widget(definition, form))
            save = gr.Button("Save", variant="primary")
        with gr.Column(scale=1):
            status = gr.Markdown()
            details = gr.JSON(label="Result")

    def on_save(*values):
        return render_result(submit_form(name, definitions, values))

    save.click(fn=on_save, inputs=inputs, outputs=[status, details])


with gr.Blocks(title="admin-forms Demo") as demo:
    gr.Markdown("""
# 📝 admin-forms Demo

Every form below is rendered from its schema definition. Submitting runs
the same normalisation and validation pipeline used by the console.
    """)

    with gr.Tab("🔑 Sign in"):
        build_login_tab()

    with gr.Tab("🔌 Listener"):
        build_schema_tab("listener")


if __name__ == "__main__":
    config = get_config()
    setup_logging(level=config.log_level, verbose=config.verbose_output, file_path=config.log_file)
    demo.launch(server_name="0.0.0.0", server_port=config.demo_port)
