from degree_audit.engines.aggregation import (
    credit_bearing,
    english_level_passed,
    find_by_keyword,
    percent_at_or_above,
    round_half_up,
    total_credits,
    year_level_subjects,
)


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(62.49) == 62
    assert round_half_up(0.5) == 1


def test_empty_bucket_is_zero_percent():
    assert percent_at_or_above([], 2.0) == 0


def test_percent_at_or_above(subject):
    bucket = [subject("BOT1112", 4.0, 3), subject("BOT1121", 3.3, 2), subject("BOT1131", 2.0, 3)]
    assert percent_at_or_above(bucket, 2.0) == 100
    # 5 of 8 credits = 62.5%
    assert percent_at_or_above(bucket, 2.7) == 63
    assert percent_at_or_above(bucket, 3.7) == 38


def test_percent_is_monotone_in_threshold(subject):
    bucket = [subject("A1", 4.0, 3), subject("A2", 2.7, 2), subject("A3", 1.3, 1), subject("A4", 0.0, 2)]
    thresholds = [0.0, 1.0, 1.3, 1.7, 2.0, 2.7, 3.0, 3.7, 4.0]
    values = [percent_at_or_above(bucket, t) for t in thresholds]
    assert values == sorted(values, reverse=True)


def test_credit_bearing_drops_audits_and_excluded(subject):
    subjects = [
        subject("ENG1b10", 3.0, 0),
        subject("FSC115α", 4.0, 1),
        subject("CSC1113", 4.0, 3),
    ]
    kept = credit_bearing(subjects, frozenset({"fsc115a"}))
    assert [s.code for s in kept] == ["CSC1113"]
    assert total_credits(kept) == 3


def test_english_level_needs_c(subject):
    subjects = [subject("ENG1b10", 2.0, 0), subject("ENG2b10", 1.7, 0)]
    assert english_level_passed(subjects, 1)
    assert not english_level_passed(subjects, 2)
    assert not english_level_passed(subjects, 3)


def test_year_level_subjects(subject):
    subjects = [subject("CSC4046", 3.0), subject("MAT4b6β", 3.0), subject("CSC3122", 3.0)]
    assert [s.code for s in year_level_subjects(subjects, 4)] == ["CSC4046", "MAT4b6β"]


def test_find_by_keyword(subject):
    subjects = [
        subject("CSC3122", 4.0, name="Machine Learning"),
        subject("CSC3216", 3.3, name="INDUSTRY Placement"),
    ]
    assert find_by_keyword(subjects, ("placement",)).code == "CSC3216"
    assert find_by_keyword(subjects, ("research project",)) is None
