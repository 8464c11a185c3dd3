class StateKeys:
    """Keys for form session data stored in ``st.session_state``."""

    LANG = "lang"
    STEP = "stepforms.current_step"
    FORM_DATA = "stepforms.form_data"
    VALIDATION_MESSAGE = "stepforms.validation_message"
    COMPLETED = "stepforms.completed"
    TASK_TYPE = "stepforms.task_type"


class UIKeys:
    """Key prefixes for widgets painted from a rendered form."""

    WIDGET_PREFIX = "ui.stepforms"
