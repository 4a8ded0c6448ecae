import pytest

from degree_audit.data import DataLoader
from degree_audit.engines import RequirementEvaluator
from degree_audit.models import SubjectRecord

LETTERS = {
    4.0: "A", 3.7: "A-", 3.3: "B+", 3.0: "B", 2.7: "B-", 2.3: "C+",
    2.0: "C", 1.7: "C-", 1.3: "D+", 1.0: "D", 0.0: "E",
}


@pytest.fixture(scope="session")
def loader():
    return DataLoader()


@pytest.fixture(scope="session")
def registry(loader):
    return loader.registry


@pytest.fixture
def evaluator(registry):
    return RequirementEvaluator(registry)


@pytest.fixture
def subject():
    """Factory for SubjectRecords; the letter grade follows the scale."""
    def make(code, grade_scale, credit=2, name="", year=0):
        return SubjectRecord(
            code=code,
            name=name,
            grade=LETTERS.get(grade_scale, "?"),
            credit=credit,
            grade_scale=grade_scale,
            year=year,
        )
    return make
