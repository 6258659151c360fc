"""
Application errors.

Every request failure is an ApiException carrying the HTTP status it maps
to. The API layer answers with that status and an empty body.
"""


class ApiException(Exception):
    """
    Base exception for all API errors.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(ApiException):
    """Raised for any invalid or unresolvable request input."""
    status_code = 400
    error_code = "bad_request"


class MissingParameter(BadRequest):
    """Raised when a required parameter is absent."""
    error_code = "missing_parameter"

    def __init__(self, field: str):
        super().__init__(f"Missing required parameter: {field}")
        self.field = field


class InvalidParameter(BadRequest):
    """Raised when a parameter is present but not acceptable."""
    error_code = "invalid_parameter"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MedicationNotFound(BadRequest):
    error_code = "medication_not_found"

    def __init__(self, medication_id: int):
        super().__init__(f"Medication not found: {medication_id}")
        self.medication_id = medication_id


class PatientNotFound(BadRequest):
    error_code = "patient_not_found"

    def __init__(self, patient_id: int):
        super().__init__(f"Patient not found: {patient_id}")
        self.patient_id = patient_id


class MedicationAlreadyAssigned(BadRequest):
    error_code = "medication_already_assigned"

    def __init__(self, patient_id: int, medication_id: int):
        super().__init__(f"Patient {patient_id} already takes medication {medication_id}")
        self.patient_id = patient_id
        self.medication_id = medication_id


class MedicationNotAssigned(BadRequest):
    error_code = "medication_not_assigned"

    def __init__(self, patient_id: int, medication_id: int):
        super().__init__(f"Patient {patient_id} does not take medication {medication_id}")
        self.patient_id = patient_id
        self.medication_id = medication_id
