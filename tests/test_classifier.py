from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from photo_classifier import PhotoClassifier, RecordStructureError, TimestampFormatError, classify
from photo_classifier.core.services.emit_service import split_output

SAMPLE = (
    "photo.jpg, Warsaw, 2013-09-05 14:08:15\n"
    "john.jpg, London, 2015-06-21 15:12:22\n"
    "photo2.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo1.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo3.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo10.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo4.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo11.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo5.jpg, Warsaw, 2013-09-05 11:08:17\n"
    "photo23.jpeg, Warsaw, 2013-09-05 11:08:15\n"
    "photo7.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo10.jpg, Warsaw, 2013-09-05 11:08:15\n"
    "photo9.png, Warsaw, 2013-09-05 11:08:15\n"
)

SAMPLE_RESULT = (
    "Warsaw12.jpg\n"
    "London1.jpg\n"
    "Warsaw01.jpg\n"
    "Warsaw02.jpg\n"
    "Warsaw03.jpg\n"
    "Warsaw04.jpg\n"
    "Warsaw05.jpg\n"
    "Warsaw06.jpg\n"
    "Warsaw11.jpg\n"
    "Warsaw07.jpeg\n"
    "Warsaw08.jpg\n"
    "Warsaw09.jpg\n"
    "Warsaw10.png\n"
)


def test_two_records_same_city() -> None:
    text = "a.jpg, X, 2020-01-01 00:00:01\nb.jpg, X, 2020-01-01 00:00:00\n"

    assert classify(text) == "X2.jpg\nX1.jpg\n"


def test_sample_batch_with_duplicate_names_and_ties() -> None:
    assert classify(SAMPLE) == SAMPLE_RESULT


def test_input_without_trailing_newline() -> None:
    assert classify(SAMPLE.rstrip("\n")) == SAMPLE_RESULT


def test_output_has_one_line_per_record() -> None:
    names = split_output(classify(SAMPLE))

    assert len(names) == len(SAMPLE.splitlines())


def test_thirteen_photos_in_one_city_get_two_digit_ids() -> None:
    # records arrive newest first, the last two share a timestamp
    records = [f"p{i}.jpg, Warsaw, 2016-01-01 10:00:{59 - i:02d}" for i in range(12)]
    records.append("p12.png, Warsaw, 2016-01-01 10:00:48")

    names = split_output(classify("\n".join(records)))

    assert names[-2:] == ["Warsaw01.jpg", "Warsaw02.png"]
    assert names[0] == "Warsaw13.jpg"
    assert sorted(n[6:8] for n in names) == [f"{i:02d}" for i in range(1, 14)]


def test_equal_timestamps_keep_input_order() -> None:
    text = "".join(f"f{i}.jpg, Oslo, 2021-05-05 05:05:05\n" for i in range(3))

    assert classify(text) == "Oslo1.jpg\nOslo2.jpg\nOslo3.jpg\n"


def test_cities_padded_independently() -> None:
    big = [f"b{i}.jpg, Big, 2020-01-01 00:00:{i:02d}" for i in range(10)]
    text = "\n".join(["s.jpg, Small, 2020-01-01 00:00:00"] + big)

    names = split_output(classify(text))

    assert names[0] == "Small1.jpg"
    assert names[1:] == [f"Big{i:02d}.jpg" for i in range(1, 11)]


def test_city_whitespace_forms_a_distinct_group() -> None:
    # Only the separator space is consumed; extra padding is part of the city.
    text = "a.jpg, Rome, 2020-01-01 00:00:00\nb.jpg,  Rome, 2020-01-01 00:00:00\n"

    assert classify(text) == "Rome1.jpg\n Rome1.jpg\n"


@pytest.mark.parametrize("text", ["", None])
def test_empty_input(text: str | None) -> None:
    assert classify(text) == ""


def test_repeated_calls_are_identical() -> None:
    classifier = PhotoClassifier()

    assert classifier.classify(SAMPLE) == classifier.classify(SAMPLE) == classify(SAMPLE)


def test_concurrent_calls_are_independent() -> None:
    classifier = PhotoClassifier()
    inputs = [SAMPLE, "a.jpg, X, 2020-01-01 00:00:00\n"] * 8

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(classifier.classify, inputs))

    assert results == [SAMPLE_RESULT, "X1.jpg\n"] * 8


def test_missing_extension_aborts_whole_batch() -> None:
    text = "a.jpg, X, 2020-01-01 00:00:00\nb, X, 2020-01-01 00:00:00\n"

    with pytest.raises(RecordStructureError):
        classify(text)


def test_bad_timestamp_aborts_whole_batch() -> None:
    text = "a.jpg, X, 2020-01-01 00:00:00\nb.jpg, X, 01/01/2020 00:00\n"

    with pytest.raises(TimestampFormatError) as exc_info:
        classify(text)

    assert exc_info.value.line_number == 2
