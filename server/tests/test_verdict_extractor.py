from complaint_vision.services.ai_models.language.verdict_extractor import (
    capture_braces,
    extract_verdict,
)


def test_json_surrounded_by_prose_is_captured():
    text = (
        'Sure! Here is the result: {"is_relevant": true, '
        '"description": "Pothole visible, moderate severity."} Thanks.'
    )

    result = extract_verdict(text)

    assert result.status_code == 200
    assert result.body == {"is_relevant": True, "description": "Pothole visible, moderate severity."}


def test_same_reply_always_gives_same_verdict():
    text = 'Sure! {"is_relevant": true, "description": "Pothole visible, moderate severity."} Thanks.'

    first = extract_verdict(text)
    second = extract_verdict(text)

    assert first == second


def test_prose_without_braces_becomes_description():
    result = extract_verdict("  This looks like a broken streetlight, clearly genuine.\n")

    assert result.status_code == 200
    assert result.body == {
        "is_relevant": True,
        "description": "This looks like a broken streetlight, clearly genuine.",
    }


def test_empty_reply_is_server_error():
    result = extract_verdict("")

    assert result.status_code == 500
    assert result.body == {
        "is_relevant": False,
        "reason": "AI response was empty. Please upload a clear image.",
    }


def test_whitespace_only_reply_becomes_blank_description():
    result = extract_verdict(" \n\t ")

    assert result.status_code == 200
    assert result.body == {"is_relevant": True, "description": ""}


def test_irrelevant_json_is_passed_through():
    text = '{"is_relevant": false, "reason": "Image does not appear to be related."}'

    result = extract_verdict(text)

    assert result.status_code == 200
    assert result.body == {"is_relevant": False, "reason": "Image does not appear to be related."}


def test_markdown_fenced_json():
    text = '```json\n{"is_relevant": true, "description": "Garbage pile on road."}\n```'

    assert extract_verdict(text).body == {"is_relevant": True, "description": "Garbage pile on road."}


def test_unexpected_fields_are_not_validated():
    text = '{"verdict": "maybe", "score": 0.4}'

    assert extract_verdict(text).body == {"verdict": "maybe", "score": 0.4}


def test_malformed_json_falls_back_to_full_text():
    text = 'Result: {"is_relevant": true, "description": "Leaking pipe",} done'

    result = extract_verdict(text)

    assert result.status_code == 200
    assert result.body == {"is_relevant": True, "description": text}


def test_capture_is_greedy_first_to_last_brace():
    text = 'A {"a": 1} B {"b": 2} C'

    assert capture_braces(text) == '{"a": 1} B {"b": 2}'
    # The greedy span is not valid JSON, so the whole reply becomes the description
    assert extract_verdict(text).body == {"is_relevant": True, "description": text}


def test_nested_braces_decode():
    text = 'Here: {"is_relevant": true, "description": "Open drain", "extra": {"severity": 3}}'

    assert extract_verdict(text).body["extra"] == {"severity": 3}


def test_capture_braces_none_without_closing_brace():
    assert capture_braces("only an opening { here") is None


def test_nan_is_not_accepted_as_json():
    text = '{"is_relevant": true, "score": NaN}'

    assert extract_verdict(text).body == {"is_relevant": True, "description": text}


def test_out_of_range_number_is_not_accepted_as_json():
    text = '{"is_relevant": true, "description": "Pothole", "score": 1e999}'

    result = extract_verdict(text)

    assert result.status_code == 200
    assert result.body == {"is_relevant": True, "description": text}


def test_large_finite_numbers_still_decode():
    text = '{"is_relevant": true, "description": "Pothole", "score": 1.5e300}'

    assert extract_verdict(text).body["score"] == 1.5e300
