import pytest

from degree_audit.engines import HonoursClassifier


@pytest.fixture
def classifier():
    return HonoursClassifier()


def test_second_upper_without_first(classifier, subject):
    subjects = [subject(f"BOT31{i:02d}", 3.0, 3) for i in range(15)]
    first, upper, lower = classifier.classify(3.35, subjects)
    assert not first.met
    assert upper.met
    assert lower.met
    assert upper.credits == 45


def test_high_gpa_without_enough_credits(classifier, subject):
    subjects = [subject(f"CSC31{i:02d}", 3.7, 3) for i in range(10)]
    tiers = classifier.classify(3.75, subjects)
    assert [t.met for t in tiers] == [False, False, False]
    assert tiers[0].credits == 30


def test_first_class(classifier, subject):
    subjects = [subject(f"CSC41{i:02d}", 4.0, 4) for i in range(10)]
    assert all(t.met for t in classifier.classify(3.8, subjects))


def test_excluded_units_do_not_count(classifier, subject):
    subjects = [subject("FSC115α", 4.0, 40)]
    first = classifier.classify(3.9, subjects, frozenset({"fsc115a"}))[0]
    assert first.credits == 0 and not first.met


def test_tier_labels(classifier):
    labels = [t.label for t in classifier.classify(0.0, [])]
    assert labels == [
        "1st Class: GPA ≥ 3.70 & 40+ credits A",
        "2nd Upper: GPA ≥ 3.30 & 40+ credits B",
        "2nd Lower: GPA ≥ 3.00 & 40+ credits B",
    ]
