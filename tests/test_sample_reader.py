"""Tests for JSON sample reading."""

import pytest

from api_mocker.sample_reader import SampleReadError, read_json_file, validate_json


class TestValidateJson:
    """Tests for validate_json."""

    def test_valid_object(self):
        assert validate_json('{"name": "test", "value": 123}')

    def test_valid_array(self):
        assert validate_json('[{"id": 1}, {"id": 2}]')

    def test_invalid(self):
        assert not validate_json('{"name": "test", "value": }')
        assert not validate_json('{"name": "test" "value": 123}')

    def test_empty_string(self):
        assert not validate_json('')

    def test_scalars(self):
        for text in ('123', '"string"', 'true', 'null'):
            assert validate_json(text)


class TestReadJsonFile:
    """Tests for read_json_file."""

    def test_reads_file(self, tmp_json):
        assert read_json_file(tmp_json('{"a": [1]}')) == {'a': [1]}

    def test_invalid_json(self, tmp_json):
        with pytest.raises(SampleReadError, match="JSON valide"):
            read_json_file(tmp_json('{oops'))

    def test_missing_file(self, tmp_path):
        with pytest.raises(SampleReadError, match="lecture"):
            read_json_file(str(tmp_path / 'missing.json'))
