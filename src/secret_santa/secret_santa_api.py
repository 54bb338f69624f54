import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .assignment_service import AssignmentService
from .constants import EMPLOYEE_REQUIRED_FIELDS, LAST_YEAR_REQUIRED_FIELDS
from .participant import Participant, PreviousPairing
from .participant_repository import ParticipantsRepository
from .validator import validate_data

logger = logging.getLogger(__name__)

STATUS_ASSIGNED = "assigned"
STATUS_INVALID_EMPLOYEES = "invalid_employees"
STATUS_INVALID_PREVIOUS = "invalid_previous"


# --- The Public API Facade ---

class SecretSantaAPI:
    """
    Orchestrates reading, validating, assigning and writing.
    This is the primary entry point for any client (CLI, tests, etc.).
    """

    def __init__(
        self,
        repository: Optional[ParticipantsRepository] = None,
        service: Optional[AssignmentService] = None,
        default_output_dir: Union[str, Path] = '.',
    ):
        self.repository = repository or ParticipantsRepository()
        self.service = service or AssignmentService()
        self.default_output_dir = Path(default_output_dir)

    def assign(
        self,
        employee_records: Sequence[Mapping[str, Any]],
        previous_records: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Validates in-memory records and generates assignments. No file I/O.

        :raises ExhaustedAttemptsError: If no valid assignment could be found.
        :return: A dictionary result object with:
                 'status': (str) 'assigned', 'invalid_employees' or 'invalid_previous'
                 'errors': (list) Validation messages, empty on success.
                 'assignments': (list) Assignment objects, empty on failure.
        """
        invalid = self._check_employees(employee_records)
        if invalid:
            return invalid
        return self._assign_checked(employee_records, previous_records)

    def _check_employees(self, employee_records: Sequence[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Returns an invalid_employees result, or None when the records pass."""
        employee_check = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)
        if employee_check.valid:
            return None
        logger.warning(f"Employee data failed validation with {len(employee_check.errors)} error(s).")
        return self._result(STATUS_INVALID_EMPLOYEES, errors=employee_check.errors)

    def _assign_checked(
        self,
        employee_records: Sequence[Mapping[str, Any]],
        previous_records: Optional[Sequence[Mapping[str, Any]]],
    ) -> Dict[str, Any]:
        previous_pairings: List[PreviousPairing] = []
        if previous_records is not None:
            previous_check = validate_data(previous_records, LAST_YEAR_REQUIRED_FIELDS)
            if not previous_check.valid:
                logger.warning(f"Previous year data failed validation with {len(previous_check.errors)} error(s).")
                return self._result(STATUS_INVALID_PREVIOUS, errors=previous_check.errors)
            previous_pairings = [PreviousPairing.from_record(r) for r in previous_records]

        participants = [Participant.from_record(r) for r in employee_records]
        logger.info(
            f"Generating assignments for {len(participants)} participants "
            f"with {len(previous_pairings)} previous pairing(s) to avoid."
        )
        assignments = self.service.generate(participants, previous_pairings)
        return self._result(STATUS_ASSIGNED, assignments=assignments)

    def run(
        self,
        employee_file: Union[str, Path],
        previous_file: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None,
        ask_previous_file: Optional[Callable[[], Optional[str]]] = None,
    ) -> Dict[str, Any]:
        """
        Main API method: reads the CSV inputs, assigns, and saves the result.

        :param employee_file: CSV with Employee_Name and Employee_EmailID.
        :param previous_file: (Optional) Last year's assignment CSV. Blank means none.
        :param output_dir: (Optional) Where to write; defaults to default_output_dir.
        :param ask_previous_file: (Optional) Called for the previous year file when
                                  previous_file is None, only once the employee
                                  data has passed validation.

        :raises RepositoryError: For CSV I/O issues.
        :raises ExhaustedAttemptsError: If no valid assignment could be found.

        :return: The assign() result plus 'output_file' (str or None).
        """
        employee_records = self.repository.read_records(employee_file)
        invalid = self._check_employees(employee_records)
        if invalid:
            return invalid

        if previous_file is None and ask_previous_file is not None:
            previous_file = ask_previous_file()

        previous_records = None
        if previous_file is not None and str(previous_file).strip() != '':
            previous_records = self.repository.read_records(previous_file)

        result = self._assign_checked(employee_records, previous_records)
        if result["status"] != STATUS_ASSIGNED:
            return result

        target_dir = Path(output_dir) if output_dir else self.default_output_dir
        output_path = self.repository.build_output_path(target_dir)
        self.repository.write_assignments(output_path, [a.to_record() for a in result["assignments"]])
        result["output_file"] = str(output_path)
        return result

    @staticmethod
    def _result(status: str, errors: Optional[List[str]] = None, assignments: Optional[list] = None) -> Dict[str, Any]:
        return {
            "status": status,
            "errors": errors or [],
            "assignments": assignments or [],
            "output_file": None,
        }
