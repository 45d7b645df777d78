import logging
import time

from rfcdoctool.formatting.toc_generator import process_toc
from rfcdoctool.utils.decorators import profile_performance


def test_profile_performance(caplog):
    @profile_performance
    def sample(x):
        time.sleep(0.01)
        return x * 2

    with caplog.at_level(logging.DEBUG):
        result = sample(3)

    assert result == 6
    assert any("sample took" in record.message for record in caplog.records)


def test_transforms_are_profiled(caplog):
    with caplog.at_level(logging.DEBUG):
        process_toc("1. Intro")
    messages = [record.message for record in caplog.records]
    assert any(m.startswith("process_toc took") and m.endswith("on 8 characters") for m in messages)
    assert process_toc.__name__ == "process_toc"
