"""
In-memory store for medications and patients.

State lives for the life of the process. A single re-entrant lock guards
both collections and their id counters; callers that need to read, mutate
and serialize as one step hold `store.lock` around the whole sequence.
"""
import threading
from typing import Dict, List

from app.config import get_settings
from app.exceptions import (
    InvalidParameter,
    MedicationAlreadyAssigned,
    MedicationNotAssigned,
    MedicationNotFound,
    PatientNotFound,
)
from app.logging_config import get_logger
from app.models import Medication, Patient

logger = get_logger(__name__)


class Store:
    """
    Holds every Medication and Patient and hands out their ids.

    Ids start at 0 per collection and are never reused, even after a
    delete. Deleting a medication does not remove it from patients'
    lists.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.lock = threading.RLock()
        self.reset()

    def reset(self) -> None:
        with self.lock:
            self._medications: Dict[int, Medication] = {}
            self._patients: Dict[int, Patient] = {}
            self._next_medication_id = 0
            self._next_patient_id = 0

    @property
    def medication_count(self) -> int:
        with self.lock:
            return len(self._medications)

    @property
    def patient_count(self) -> int:
        with self.lock:
            return len(self._patients)

    # Medications

    def get_medication(self, medication_id: int) -> Medication:
        with self.lock:
            medication = self._medications.get(medication_id)
            if medication is None:
                raise MedicationNotFound(medication_id)
            return medication

    def create_medication(self, name: str) -> Medication:
        with self.lock:
            medication = Medication(self._next_medication_id, name, self.base_url)
            self._medications[medication.id] = medication
            self._next_medication_id += 1
        logger.info(f"Created medication {medication.id} ({name!r})")
        return medication

    def delete_medication(self, medication_id: int) -> None:
        with self.lock:
            if self._medications.pop(medication_id, None) is None:
                raise MedicationNotFound(medication_id)
        logger.info(f"Deleted medication {medication_id}")

    # Patients

    def get_patient(self, patient_id: int) -> Patient:
        with self.lock:
            patient = self._patients.get(patient_id)
            if patient is None:
                raise PatientNotFound(patient_id)
            return patient

    def create_patient(self, first_name: str, last_name: str, age: int) -> Patient:
        if age < 0:
            raise InvalidParameter("age", f"Age must not be negative: {age}")
        with self.lock:
            patient = Patient(self._next_patient_id, first_name, last_name, age, self.base_url)
            self._patients[patient.id] = patient
            self._next_patient_id += 1
        logger.info(f"Created patient {patient.id}")
        return patient

    # Patient medications

    def add_patient_medication(self, patient_id: int, medication_id: int) -> List[Medication]:
        """
        Put a stored medication on a patient's list.

        Returns:
            The patient's medication list after the append

        Raises:
            MedicationNotFound, PatientNotFound: either id does not resolve
            MedicationAlreadyAssigned: the patient already takes it
        """
        with self.lock:
            medication = self.get_medication(medication_id)
            patient = self.get_patient(patient_id)
            if patient.takes(medication):
                raise MedicationAlreadyAssigned(patient_id, medication_id)
            patient.medications.append(medication)
            logger.info(f"Patient {patient_id} now takes medication {medication_id}")
            return patient.medications

    def remove_patient_medication(self, patient_id: int, medication_id: int) -> None:
        """
        Take a medication off a patient's list. The medication itself
        must still exist in the store.
        """
        with self.lock:
            medication = self.get_medication(medication_id)
            patient = self.get_patient(patient_id)
            if not patient.takes(medication):
                raise MedicationNotAssigned(patient_id, medication_id)
            patient.medications.remove(medication)
        logger.info(f"Patient {patient_id} no longer takes medication {medication_id}")


store = Store(base_url=get_settings().base_url)


def get_store() -> Store:
    """
    Return the process-wide store.
    """
    return store
