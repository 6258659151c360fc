from sqlmodel import Field, SQLModel
from typing import List


class Medication:
    """
    A medication known to the store. Names need not be unique; two
    medications are the same medication when their ids match.
    """

    def __init__(self, id: int, name: str, base_url: str):
        self._id = id
        self.name = name
        self.uri = f"{base_url}/medications/{id}"

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other):
        if isinstance(other, Medication):
            return other.id == self.id
        return NotImplemented

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Medication(id={self._id!r}, name={self.name!r})"

    def to_json(self) -> dict:
        return {"id": self._id, "name": self.name, "uri": self.uri}


class Patient:
    """
    A patient and the medications they currently take. Only `medications`
    changes after construction; it holds references shared with the store.
    """

    def __init__(self, id: int, first_name: str, last_name: str, age: int, base_url: str):
        self._id = id
        self.first_name = first_name
        self.last_name = last_name
        self.age = age
        self.uri = f"{base_url}/patients/{id}"
        self.medications: List[Medication] = []

    @property
    def id(self) -> int:
        return self._id

    def takes(self, medication: Medication) -> bool:
        # id equality, see Medication.__eq__
        return medication in self.medications

    def __repr__(self):
        return f"Patient(id={self._id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"

    def medications_json(self) -> List[dict]:
        return [medication.to_json() for medication in self.medications]

    def to_json(self) -> dict:
        return {
            "id": self._id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
            "medications": self.medications_json(),
            "uri": self.uri,
        }


class MedicationRead(SQLModel):
    id: int
    name: str
    uri: str


class PatientRead(SQLModel):
    id: int
    firstName: str
    lastName: str
    age: int = Field(ge=0)
    medications: List[MedicationRead] = []
    uri: str
