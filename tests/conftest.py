import pytest
import pluckbank as pb
from pluckbank.config import ErrorMode


@pytest.fixture(autouse=True)
def _restore_config():
    pb.set_sample_rate(44100)
    pb.set_error_mode(ErrorMode.STRICT)
    yield
    pb.set_sample_rate(44100)
    pb.set_error_mode(ErrorMode.STRICT)
