from pydantic import BaseModel, ValidationError as PydanticValidationError

from jobboard.core.errors import ValidationError


def parse_form(model: type[BaseModel], **fields):
    """
    Build ``model`` from multipart form values. Fields that were not sent (None)
    stay unset, so ``model_dump(exclude_unset=True)`` yields only what the client sent.
    """
    present = {k: v for k, v in fields.items() if v is not None}
    try:
        return model(**present)
    except PydanticValidationError as e:
        messages = []
        for err in e.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "Invalid value"))
        raise ValidationError("; ".join(messages)) from e
