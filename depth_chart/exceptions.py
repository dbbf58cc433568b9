from rest_framework.exceptions import ValidationError


class InvalidAssignment(ValidationError):
    """A depth chart write that would break the roster or slot invariants."""
    default_detail = 'Invalid depth chart assignment.'
    default_code = 'invalid_assignment'
