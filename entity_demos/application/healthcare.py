"""
Healthcare Demo

Patients and prescriptions in two independent stores, with prescriptions
grouped by patient for lookup.
"""

import logging
from typing import Dict, List, Optional

from entity_demos.application.console import print_header, print_section, report_failure
from entity_demos.domain.errors import attempt
from entity_demos.domain.models import Patient, Prescription
from entity_demos.domain.services import group_prescriptions_by_patient
from entity_demos.domain.store import KeyedEntityStore
from entity_demos.infrastructure.config import AppConfig, get_config
from entity_demos.infrastructure.seed_data import SeedLoader

logger = logging.getLogger(__name__)


class HealthSystemApp:
    def __init__(self, config: Optional[AppConfig] = None, seeds: Optional[SeedLoader] = None):
        self.config = config or get_config()
        self.seeds = seeds or SeedLoader(self.config.seed_dir)
        self.patients: KeyedEntityStore[Patient] = KeyedEntityStore()
        self.prescriptions: KeyedEntityStore[Prescription] = KeyedEntityStore()
        self.prescription_map: Dict[int, List[Prescription]] = {}

    def seed(self) -> None:
        seed = self.seeds.healthcare()
        for patient in seed.patients:
            result = attempt(self.patients.insert, patient)
            if not result.ok:
                report_failure("seeding patient", result)
        for prescription in seed.prescriptions:
            result = attempt(self.prescriptions.insert, prescription)
            if not result.ok:
                report_failure("seeding prescription", result)
        logger.debug("Seeded %d patients, %d prescriptions", len(self.patients), len(self.prescriptions))

    def build_prescription_map(self) -> Dict[int, List[Prescription]]:
        """Regroup every stored prescription by patient id."""
        self.prescription_map = group_prescriptions_by_patient(
            sorted(self.prescriptions.get_all(), key=lambda p: p.id)
        )
        return self.prescription_map

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        return list(self.prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        print_section("All Patients")
        patients = self.patients.get_all()
        if not patients:
            print("No patients found.")
            return
        for patient in patients:
            print(patient)

    def print_all_prescriptions(self) -> None:
        print_section("All Prescriptions")
        prescriptions = self.prescriptions.get_all()
        if not prescriptions:
            print("No prescriptions found.")
            return
        for prescription in prescriptions:
            print(prescription)

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        print_section(f"Prescriptions for Patient ID: {patient_id}")
        patient = self.patients.find_by(lambda p: p.id == patient_id)
        if patient is None:
            print(f"Patient with ID {patient_id} not found.")
            return

        print(f"Patient: {patient.name}")
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            print("No prescriptions found for this patient.")
            return
        print("Prescriptions:")
        for prescription in prescriptions:
            print(f"  - {prescription}")

    def run(self) -> None:
        print_header("HEALTHCARE MANAGEMENT SYSTEM")
        self.seed()
        mapped = self.build_prescription_map()
        print(f"Prescription map built. Mapped {len(mapped)} patients.")

        self.print_all_patients()
        self.print_all_prescriptions()
        for patient in sorted(self.patients.get_all(), key=lambda p: p.id):
            self.print_prescriptions_for_patient(patient.id)
        self.print_prescriptions_for_patient(999)
