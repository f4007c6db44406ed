from uuid import UUID

from fastapi import status

from .base import AppError


class RecipientRequiredError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("User ID is required.")


class ConnectionRequestNotFoundError(AppError):
    # Not found, not addressed to the caller and already processed all end up here.
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, request_id: UUID):
        detail = f"Connection request {request_id} not found or already processed."
        super().__init__(detail)


class ConnectionRequestForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, request_id: UUID):
        detail = f"Not authorized to reject connection request {request_id}."
        super().__init__(detail)


class ConnectionRequestAlreadyProcessedError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, request_id: UUID):
        detail = f"Connection request {request_id} has already been processed."
        super().__init__(detail)
