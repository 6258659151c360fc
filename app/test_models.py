from app.models import Medication, MedicationRead, Patient, PatientRead

BASE_URL = "http://localhost:8080/api/v1"


def test_medication_projection():
    medication = Medication(4, "Aspirin", BASE_URL)
    assert medication.to_json() == {
        "id": 4,
        "name": "Aspirin",
        "uri": "http://localhost:8080/api/v1/medications/4",
    }
    assert MedicationRead.model_validate(medication.to_json()).name == "Aspirin"


def test_medication_equality_by_id():
    assert Medication(1, "Aspirin", BASE_URL) == Medication(1, "Ibuprofen", BASE_URL)
    assert Medication(1, "Aspirin", BASE_URL) != Medication(2, "Aspirin", BASE_URL)
    assert Medication(1, "Aspirin", BASE_URL) != 1
    assert len({Medication(1, "A", BASE_URL), Medication(1, "B", BASE_URL)}) == 1


def test_patient_projection_nests_medications_in_order():
    patient = Patient(2, "Jane", "Doe", 30, BASE_URL)
    patient.medications.append(Medication(1, "Ibuprofen", BASE_URL))
    patient.medications.append(Medication(0, "Aspirin", BASE_URL))

    data = patient.to_json()
    assert list(data) == ["id", "firstName", "lastName", "age", "medications", "uri"]
    assert [m["id"] for m in data["medications"]] == [1, 0]
    assert data["uri"] == "http://localhost:8080/api/v1/patients/2"

    read = PatientRead.model_validate(data)
    assert read.medications[1].name == "Aspirin"
