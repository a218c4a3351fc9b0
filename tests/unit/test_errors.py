import subprocess

import pytest

from screenshot_renamer.core.errors import (
    RENAMER_ERRORS,
    AgentInvocationError,
    CollisionError,
    FileValidationError,
    NameProposalError,
    RenamerError,
    classify_renamer_error,
    renamer_error_guard,
)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (FileNotFoundError(2, "No such file", "/tmp/x.png"), FileValidationError),
        (FileExistsError(17, "exists", "/tmp/x.png"), CollisionError),
        (subprocess.CalledProcessError(1, ["claude"]), AgentInvocationError),
        (subprocess.TimeoutExpired(["claude"], 5), AgentInvocationError),
        (ValueError("odd"), RenamerError),
    ],
)
def test_classify(exc, expected):
    out = classify_renamer_error(exc)
    assert type(out) is expected


def test_typed_errors_pass_through():
    e = NameProposalError("x")
    assert classify_renamer_error(e) is e
    assert all(issubclass(cls, RenamerError) for cls in RENAMER_ERRORS)


def test_guard_wraps_foreign_and_keeps_typed():
    with pytest.raises(CollisionError) as info:
        with renamer_error_guard():
            raise FileExistsError("taken")
    assert isinstance(info.value.__cause__, FileExistsError)

    with pytest.raises(NameProposalError):
        with renamer_error_guard():
            raise NameProposalError("empty")
