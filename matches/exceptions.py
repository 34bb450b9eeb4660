"""
Typed failures raised by the match lifecycle engine.
They are DRF APIExceptions, so the API layer renders them without
any extra translation.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class LifecycleError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Match lifecycle error.'
    default_code = 'lifecycle_error'


class NotFound(LifecycleError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class Unauthorized(LifecycleError):
    """Caller is not a party to the match or lacks the required role"""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You are not allowed to act on this resource.'
    default_code = 'unauthorized'


class InvalidState(LifecycleError):
    """Already decided, already cancelled, already matched"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This action is not allowed in the current state.'
    default_code = 'invalid_state'


class Expired(LifecycleError):
    status_code = status.HTTP_410_GONE
    default_detail = 'Match has expired.'
    default_code = 'expired'


class ValidationError(LifecycleError):
    default_detail = 'Invalid value.'
    default_code = 'invalid'
