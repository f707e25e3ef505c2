from typing import List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import ValidationError


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def check_email(value: str, message: str = "Please enter a valid email address") -> str:
    value = (value or "").strip()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(message)
    return value


def require_text(value: Optional[str], message: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(message)
    return value


def format_validation_errors(exc: ValidationError) -> List[str]:
    """
    Turn a pydantic ValidationError into messages fit for st.error.
    Our own validators already phrase full sentences; built-in errors get the field name.
    """
    messages = []
    for err in exc.errors():
        msg = err.get("msg", "")
        if err.get("type") == "value_error":
            messages.append(msg.removeprefix("Value error, "))
            continue
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "__root__")
        label = field.replace("_", " ").capitalize() if field else "Form"
        messages.append(f"{label}: {msg}")
    return messages
