"""
Palette Picker Backend — Request Validation Unit Tests
========================================================

What:  Tests for the required-field probe and the errors built from it.
"""

import pytest

from palette_picker.exceptions import ValidationError
from palette_picker.schemas.palette import (
    PALETTE_EXPECTED_FORMAT,
    PALETTE_REQUIRED_FIELDS,
    PaletteCreate,
)
from palette_picker.schemas.project import (
    PROJECT_EXPECTED_FORMAT,
    PROJECT_REQUIRED_FIELDS,
    ProjectCreate,
)
from palette_picker.services.validation import (
    build_model,
    find_missing_field,
    require_fields,
)


class TestFindMissingField:

    def test_complete_body_has_nothing_missing(self, sample_palette_body):
        assert find_missing_field(sample_palette_body, PALETTE_REQUIRED_FIELDS) is None

    def test_none_body_reports_first_field(self):
        assert find_missing_field(None, PALETTE_REQUIRED_FIELDS) == "palette_name"

    def test_reports_first_missing_in_declared_order(self, sample_palette_body):
        """With color2 and color4 both absent, color2 is reported."""
        del sample_palette_body["color2"]
        del sample_palette_body["color4"]
        assert find_missing_field(sample_palette_body, PALETTE_REQUIRED_FIELDS) == "color2"

    @pytest.mark.parametrize("value", [None, "", 0, False, [], {}])
    def test_falsy_values_count_as_missing(self, value):
        assert find_missing_field({"project_name": value}, PROJECT_REQUIRED_FIELDS) == "project_name"

    def test_extra_fields_are_ignored(self):
        body = {"project_name": "Sunset", "owner": "someone"}
        assert find_missing_field(body, PROJECT_REQUIRED_FIELDS) is None


class TestRequireFields:

    def test_project_message_matches_expected_format(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({}, PROJECT_REQUIRED_FIELDS, PROJECT_EXPECTED_FORMAT)

        assert exc_info.value.message == (
            'Expected format: { project_name: <String> }. '
            'You are missing a "project_name" property.'
        )
        assert exc_info.value.field == "project_name"

    def test_palette_message_names_field_and_full_shape(self, sample_palette_body):
        sample_palette_body["color5"] = ""
        with pytest.raises(ValidationError) as exc_info:
            require_fields(sample_palette_body, PALETTE_REQUIRED_FIELDS, PALETTE_EXPECTED_FORMAT)

        message = exc_info.value.message
        assert message.startswith(
            "Expected format: { palette_name: <String>, color1: <String>, color2: <String>, "
            "color3: <String>, color4: <String>, color5: <String>}."
        )
        assert message.endswith('You are missing a "color5" property.')

    def test_passes_silently_when_complete(self, sample_palette_body):
        require_fields(sample_palette_body, PALETTE_REQUIRED_FIELDS, PALETTE_EXPECTED_FORMAT)


class TestBuildModel:

    def test_builds_schema_and_drops_unknown_keys(self, sample_palette_body):
        sample_palette_body["project_id"] = 3
        sample_palette_body["favourite"] = True

        payload = build_model(PaletteCreate, sample_palette_body)

        assert payload.project_id == 3
        assert payload.palette_name == "Autumn"
        assert not hasattr(payload, "favourite")

    def test_wrong_type_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            build_model(ProjectCreate, {"project_name": 42})

        assert exc_info.value.field == "project_name"
        assert '"project_name"' in exc_info.value.message

    def test_non_integer_project_id_rejected(self, sample_palette_body):
        sample_palette_body["project_id"] = "not-a-number"
        with pytest.raises(ValidationError) as exc_info:
            build_model(PaletteCreate, sample_palette_body)

        assert exc_info.value.field == "project_id"
