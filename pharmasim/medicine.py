"""Medicines sold by the pharmacy."""

from abc import ABC, abstractmethod
from enum import Enum

from pharmasim.price import Price


class Affliction(Enum):
    """Ailments a medicine can treat."""

    ACHE = "Ache"
    ALLERGY = "Allergy"
    ATTACK = "Attack"
    BACKACHE = "Backache"
    BELLYACHE = "Bellyache"
    BITE = "Bite"
    BLEEDING = "Bleeding"
    BRUISE = "Bruise"
    BUMP = "Bump"
    BURN = "Burn"
    CHILLS = "Chills"
    COLD = "Cold"
    CONCUSSION = "Concussion"
    COUGH = "Cough"
    CUT = "Cut"
    DIARRHOEA = "Diarrhoea"
    DISLOCATION = "Dislocation"
    FATIGUE = "Fatigue"
    FOOD = "Food Poisoning"
    POISONING = "Poisoning"
    FRACTURE = "Fracture"
    HANGOVER = "Hangover"
    HEADACHE = "Headache"
    INDIGESTION = "Indigestion"
    INFECTION = "Infection"
    NAUSEA = "Nausea"
    PAIN = "Pain"
    RASH = "Rash"
    RUNNY_NOSE = "Runny Nose"
    SORE_THROAT = "Sore Throat"
    TOOTHACHE = "Toothache"
    WOUND = "Wound"

    def __str__(self):
        return self.value


class ActiveSubstance(Enum):
    """Active substances a medicine can contain."""

    PARACETAMOL = "Paracetamol"
    IBUPROFEN = "Ibuprofen"
    ASPIRIN = "Aspirin"
    METAMIZOLE = "Metamizole"
    AMOXICILLIN = "Amoxicillin"
    ACENOCOUMAROL = "Acenocoumarol"
    METFORMIN = "Metformin"
    ATORVASTATIN = "Atorvastatin"
    OMEPRAZOLE = "Omeprazole"
    SERTRALINE = "Sertraline"

    def __str__(self):
        return self.value


class Medicine(ABC):
    """A medicine kept in the pharmacy; ids are numbered from 1."""

    PROVISION = 0
    _PRESCRIPTION_LIMITS: dict = {}
    _next_id = 1

    def __init__(self, name, affliction, active_substance, milligrams, base_price, amount_in_pharmacy):
        if not isinstance(base_price, Price):
            raise TypeError("base_price must be a Price")
        self.name = name
        self.id = Medicine._next_id
        Medicine._next_id += 1
        self.affliction = Affliction(affliction)
        self.active_substance = ActiveSubstance(active_substance)
        self.milligrams = milligrams
        self.base_price = base_price
        self.amount_in_pharmacy = amount_in_pharmacy
        self.prescription = False

    def decrement(self):
        """Take one package out of stock."""
        if self.amount_in_pharmacy <= 0:
            raise ValueError(f"no {self.name} left in the pharmacy")
        self.amount_in_pharmacy -= 1
        return self

    def calculate_price(self):
        """Base price raised by the provision of this kind of medicine."""
        return self.base_price * (100 + self.PROVISION) / 100

    def check_is_on_prescription(self):
        """Whether the dose exceeds the limit for over-the-counter sale."""
        limit = self._PRESCRIPTION_LIMITS.get(self.active_substance)
        return limit is not None and self.milligrams > limit

    @abstractmethod
    def represent_as_string(self):
        """Multi-line description of the medicine."""

    def _describe(self, kind, quantity_line, dose_unit):
        lines = [
            f"{kind}: {self.name} ({self.id})",
            f"Prescription: {'yes' if self.prescription else 'no'}",
            f"Treated affliction: {self.affliction}",
            quantity_line,
            f"One {dose_unit} contains {self.milligrams} mg of {self.active_substance}",
            f"Prise: {self.calculate_price()}",
        ]
        return "".join(line + "\n" for line in lines)

    def __str__(self):
        return self.represent_as_string()

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, id={self.id})"

    @staticmethod
    def reset_ids():
        """Restart medicine numbering from 1."""
        Medicine._next_id = 1


class Capsules(Medicine):
    """Capsules sold in packs of a given number."""

    PROVISION = 5
    _PRESCRIPTION_LIMITS = {
        ActiveSubstance.PARACETAMOL: 1500,
        ActiveSubstance.IBUPROFEN: 1000,
        ActiveSubstance.ASPIRIN: 600,
        ActiveSubstance.METAMIZOLE: 400,
        ActiveSubstance.AMOXICILLIN: 50,
        ActiveSubstance.ACENOCOUMAROL: 300,
        ActiveSubstance.METFORMIN: 450,
        ActiveSubstance.ATORVASTATIN: 800,
        ActiveSubstance.OMEPRAZOLE: 20,
        ActiveSubstance.SERTRALINE: 540,
    }

    def __init__(self, name, affliction, active_substance, milligrams, base_price, amount_in_pharmacy, number):
        super().__init__(name, affliction, active_substance, milligrams, base_price, amount_in_pharmacy)
        self.number = number

    def check_is_on_prescription(self):
        return super().check_is_on_prescription()

    def represent_as_string(self):
        return self._describe("Capsules", f"Number of capsules: {self.number}", "capsule")


class Drops(Medicine):
    """Drops sold in bottles of a given volume."""

    PROVISION = 10
    _PRESCRIPTION_LIMITS = {
        ActiveSubstance.PARACETAMOL: 300,
        ActiveSubstance.IBUPROFEN: 600,
        ActiveSubstance.ASPIRIN: 300,
        ActiveSubstance.METAMIZOLE: 200,
        ActiveSubstance.AMOXICILLIN: 300,
        ActiveSubstance.ACENOCOUMAROL: 250,
        ActiveSubstance.METFORMIN: 60,
        ActiveSubstance.ATORVASTATIN: 50,
        ActiveSubstance.OMEPRAZOLE: 80,
        ActiveSubstance.SERTRALINE: 100,
    }

    def __init__(self, name, affliction, active_substance, milligrams, base_price, amount_in_pharmacy, volume_ml):
        super().__init__(name, affliction, active_substance, milligrams, base_price, amount_in_pharmacy)
        self.volume_ml = volume_ml

    def check_is_on_prescription(self):
        return super().check_is_on_prescription()

    def represent_as_string(self):
        return self._describe("Drops", f"Volume: {self.volume_ml} ml", "dose")