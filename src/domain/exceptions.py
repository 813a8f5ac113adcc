"""Domain exceptions for the problem tracker."""

from typing import Any


class TrackerError(Exception):
    """Base error; status_code is used when the error reaches the HTTP layer."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProblemNotFoundError(TrackerError):
    """No problem record with the requested id."""

    status_code = 404

    def __init__(self, problem_id: str):
        self.problem_id = problem_id
        super().__init__(f"Problem not found: {problem_id}")


class InvalidDifficultyError(TrackerError, ValueError):
    """Difficulty outside of Easy / Medium / Hard."""

    status_code = 400

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid difficulty: {value!r}. Expected one of Easy, Medium, Hard")


class RemoteLookupError(TrackerError):
    """Remote problem API returned nothing usable."""

    status_code = 404

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Problem not found on remote API: {identifier}")


class StorageError(TrackerError):
    """Reading or writing the problem collection failed."""

    pass
