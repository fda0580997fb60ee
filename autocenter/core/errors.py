# autocenter/core/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code = 400
    message_key = "operationFailed"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message_key)
        self.detail = detail


class StoreError(AppError):
    """The backing store could not complete a create/read/update/delete."""
    status_code = 503
    message_key = "operationFailed"


class NotFoundError(AppError):
    status_code = 404
    message_key = "noBookingFound"


class AuthError(AppError):
    status_code = 401
    message_key = "loginError"


class ConfirmationRequiredError(AppError):
    status_code = 409
    message_key = "confirmDelete"


def register_exception_handlers(app: FastAPI) -> None:
    from autocenter.models.messages import translate
    from autocenter.api.deps import resolve_language

    async def handle_app_error(request: Request, exc: AppError):
        lang = resolve_language(request)
        # StoreError never leaks backend details to the client
        if isinstance(exc, StoreError) or not exc.detail:
            detail = translate(exc.message_key, lang)
        else:
            detail = exc.detail
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=headers)

    app.add_exception_handler(AppError, handle_app_error)
