from pathlib import Path
from typing import Dict, Optional, Union

# --- Custom Exceptions for the API ---

class ConfigError(Exception):
    """Errors related to configuration file loading."""
    pass

# --- Configuration Management ---

class ConfigLoader:
    """
    Loads and validates configuration from a key-value text file.

    Example file::

        employee_file_path = data/employees.csv
        previous_file_path = data/secret_santa_2024.csv
        output_dir = out
        max_attempts = 1000
    """
    required_keys = ['employee_file_path', 'output_dir']

    def __init__(self, config_file_path: Union[str, Path]):
        self.config_file_path = config_file_path
        self.config_values: Dict[str, str] = {}

    def load_config(self) -> Dict[str, str]:
        """
        Reads the config file and returns a dictionary of settings.

        :raises ConfigError: If file not found or keys are missing.
        """
        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                for line in f:
                    if '=' in line:
                        key, value = line.split('=', 1)
                        self.config_values[key.strip()] = value.strip()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found at: {self.config_file_path}")
        except OSError as e:
            raise ConfigError(f"Error reading config file: {e}")

        self._validate_keys()
        return self.config_values

    def _validate_keys(self):
        """Ensure required keys are present and typed values parse."""
        missing_keys = [key for key in self.required_keys if not self.config_values.get(key)]
        if missing_keys:
            raise ConfigError(f"Missing required keys in config: {', '.join(missing_keys)}")
        if self.config_values.get('max_attempts'):
            self.get_max_attempts()

    def get_employee_path(self) -> str:
        return self.config_values['employee_file_path']

    def get_previous_path(self) -> Optional[str]:
        # Blank means there is no previous year file
        return self.config_values.get('previous_file_path') or None

    def get_output_dir(self) -> Path:
        return Path(self.config_values['output_dir'])

    def get_max_attempts(self) -> Optional[int]:
        raw = self.config_values.get('max_attempts')
        if not raw:
            return None
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(f"max_attempts must be an integer, got: {raw!r}")
        if value < 1:
            raise ConfigError(f"max_attempts must be at least 1, got: {value}")
        return value
