# Standard library imports
from typing import Any, Dict, Type, TypeVar

# External package imports
from fastapi import Request
from pydantic import BaseModel, ValidationError

# Local application imports
from ..domain.exceptions import FieldValidationError


RequestModel = TypeVar("RequestModel", bound=BaseModel)


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Read a request body as a flat dict, whichever way it was submitted
    
    JSON bodies are decoded as-is; anything else is parsed as an HTML form.
    For repeated form keys the last value wins, which lets a checkbox
    override a hidden fallback input of the same name.
    
    Args:
        request: Incoming request
        
    Returns:
        Field name to value mapping
        
    Raises:
        FieldValidationError: If a JSON body is malformed or not an object
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise FieldValidationError(["Request body is not valid JSON"], entity="Request")
        if not isinstance(body, dict):
            raise FieldValidationError(["Request body must be a JSON object"], entity="Request")
        return body
    
    form = await request.form()
    return dict(form.items())


def build_request(model: Type[RequestModel], payload: Dict[str, Any]) -> RequestModel:
    """
    Validate a payload into a request DTO
    
    Type errors from pydantic are re-raised as a FieldValidationError so the
    controllers only have one error type to render.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exception:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exception.errors()
        ]
        raise FieldValidationError(errors, entity="Request") from exception
