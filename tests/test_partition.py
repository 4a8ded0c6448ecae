import pytest

from degree_audit.data import CourseRegistry
from degree_audit.engines import SubjectPartitioner, department_group
from degree_audit.models import Family


@pytest.fixture
def partitioner(registry):
    return SubjectPartitioner(registry)


@pytest.fixture
def mixed(subject):
    return [
        subject("CSC1113", 4.0, 3),   # core combined
        subject("CSC1153", 3.3, 3),   # core practical
        subject("CSC1122", 2.3, 2),   # core theory
        subject("CSC2262", 3.0, 2),   # optional
        subject("XYZ9999", 2.0, 2),   # not in the handbook
        subject("ENG1b10", 3.0, 0),   # non-credit
    ]


def test_buckets(partitioner, mixed):
    p = partitioner.partition(mixed, family=Family.BCS)
    assert [s.code for s in p.core_theory] == ["CSC1113", "CSC1122"]
    assert [s.code for s in p.core_practical] == ["CSC1113", "CSC1153"]
    assert [s.code for s in p.optional] == ["CSC2262"]
    assert [s.code for s in p.unknown] == ["XYZ9999"]


def test_every_credit_subject_lands_somewhere(partitioner, mixed):
    p = partitioner.partition(mixed, family=Family.BCS)
    placed = {id(s) for s in p.core + p.optional + p.unknown}
    credit = [s for s in mixed if s.credit > 0]
    assert placed == {id(s) for s in credit}
    # only the combined unit is counted twice
    assert len(p.core_theory) + len(p.core_practical) == len(p.core) + 1


def test_unknown_never_counts_as_optional(partitioner, subject):
    p = partitioner.partition([subject("XYZ9999", 4.0, 3)], family=Family.BSC)
    assert p.optional == []
    assert p.core == []
    assert len(p.unknown) == 1


def test_excluded_codes_are_dropped(partitioner, subject):
    p = partitioner.partition([subject("FSC115α", 4.0, 1)], frozenset({"FSC115α"}), Family.BSC)
    assert p.optional == [] and p.unknown == []


def test_family_override_moves_mat313(partitioner, subject):
    mat = subject("MAT313β", 2.0, 2)
    bsc = partitioner.partition([mat], family=Family.BSC)
    bcs = partitioner.partition([mat], family=Family.BCS)
    assert bsc.core_theory == [mat] and bsc.optional == []
    assert bcs.optional == [mat] and bcs.core == []
    assert bcs.optional_group("mathematics") == [mat]


def test_department_groups(partitioner, mixed):
    p = partitioner.partition(mixed, family=Family.BCS)
    assert [s.code for s in p.core_group("computing")] == ["CSC1113", "CSC1153", "CSC1122"]
    assert p.core_group("mathematics") == []
    assert department_group("COM1012") == "computing"
    assert department_group("AMT111β") == "mathematics"
    assert department_group("BOT1112") == "other"


def test_override_only_code_depends_on_family(subject):
    registry = CourseRegistry.from_entries(
        [("CSC1122", "core", "theory")],
        overrides={Family.BSC: [("BIO1142", "core", "theory")]},
    )
    partitioner = SubjectPartitioner(registry)
    subjects = [subject("BIO1142", 3.0, 2), subject("CSC1122", 3.0, 2)]

    bsc = partitioner.partition(subjects, family=Family.BSC)
    assert [s.code for s in bsc.core_theory] == ["BIO1142", "CSC1122"]
    assert bsc.unknown == []

    bcs = partitioner.partition(subjects, family=Family.BCS)
    assert [s.code for s in bcs.core_theory] == ["CSC1122"]
    assert [s.code for s in bcs.unknown] == ["BIO1142"]
