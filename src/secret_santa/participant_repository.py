import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from .constants import ASSIGNMENT_FIELDS, OUTPUT_FILENAME_PREFIX

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Errors related to CSV data reading or writing."""
    pass

# --- Data Repository (CSV) ---

class ParticipantsRepository:
    """
    Reads participant and previous-year CSV files and writes assignment files.

    Every cell is read as a string and empty cells stay as ''. That leaves
    it to the validator to decide what counts as missing.
    """

    def read_records(self, csv_file_path: Optional[Union[str, Path]]) -> List[Dict[str, str]]:
        """
        Loads a CSV file as a list of row dictionaries.

        :param csv_file_path: Path to a .csv file.
        :raises RepositoryError: If the path is empty, missing, not a .csv or unreadable.
        :return: One dictionary per data row (empty list for an empty file).
        """
        if csv_file_path is None or str(csv_file_path).strip() == '':
            raise RepositoryError("File path is required.")

        path = Path(str(csv_file_path).strip())
        if not path.exists():
            raise RepositoryError(f'File "{path}" does not exist.')
        if path.suffix.lower() != '.csv':
            raise RepositoryError(f'File "{path}" is not a CSV file. Please provide a .csv file.')

        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            logger.warning(f"CSV file {path} is empty.")
            return []
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise RepositoryError(f"Error reading CSV file {path}: {e}")
        except OSError as e:
            raise RepositoryError(f"Error reading CSV file {path}: {e}")

        logger.info(f"Loaded {len(df)} rows from {path}.")
        return df.to_dict(orient='records')

    def write_assignments(self, csv_file_path: Union[str, Path], records: Sequence[Dict[str, str]]) -> Path:
        """
        Saves assignment records to a CSV file in the previous-year layout.

        :param csv_file_path: Destination path.
        :param records: Assignment rows, see Assignment.to_record.
        :raises RepositoryError: If there is nothing to write, the file already
                                 exists, or the write fails.
        :return: The path written to.
        """
        if not records:
            raise RepositoryError("No data provided to write to CSV.")

        path = Path(csv_file_path)
        df = pd.DataFrame(list(records), columns=ASSIGNMENT_FIELDS)
        try:
            # Exclusive create: an earlier draw is never overwritten
            df.to_csv(path, index=False, mode='x')
        except FileExistsError:
            raise RepositoryError(f"Output file {path} already exists. Refusing to overwrite it.")
        except PermissionError:
            raise RepositoryError(f"Permission denied. Cannot write to {path}.")
        except OSError as e:
            raise RepositoryError(f"Error writing to CSV file: {e}")

        logger.info(f"Wrote {len(df)} assignments to {path}.")
        return path

    @staticmethod
    def build_output_path(output_dir: Union[str, Path], now: Optional[datetime] = None) -> Path:
        """Returns a timestamped output file path inside output_dir, creating the directory."""
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RepositoryError(f"Error creating output directory {output_dir}: {e}")

        timestamp = (now or datetime.now()).strftime('%Y-%m-%d_%H-%M-%S-%f')[:-3]
        return output_dir / f"{OUTPUT_FILENAME_PREFIX}_{timestamp}.csv"
