"""Tests for the response parsers."""
import json

import httpx
import pytest

from linkedin_v2.linkedin.parsers import parse_email, parse_profile, parse_upload_registration, share_id


class TestParseProfile:

    def test_full_profile(self, profile_json):
        profile = parse_profile(profile_json)

        assert profile.id == "123456"
        assert profile.first_name == "Mal"
        assert profile.last_name == "Reynolds"

    def test_picture_url_is_last_element(self, profile_json):
        profile = parse_profile(profile_json)

        assert profile.picture_url == "https://upload.wikimedia.org/wikipedia/en/1/13/MalReynoldsFirefly.JPG?w=800"

    def test_name_uses_preferred_locale(self, profile_data):
        profile_data["firstName"] = {
            "localized": {"en_US": "Mal", "fr_FR": "Malcolm"},
            "preferredLocale": {"country": "FR", "language": "fr"},
        }

        assert parse_profile(json.dumps(profile_data)).first_name == "Malcolm"

    def test_missing_localized_names_are_omitted(self, profile_data):
        del profile_data["firstName"]
        profile_data["lastName"] = {"preferredLocale": {"country": "US", "language": "en"}}

        profile = parse_profile(json.dumps(profile_data))

        assert profile.first_name is None
        assert profile.last_name is None
        assert "first_name" not in profile.model_dump(exclude_none=True)

    @pytest.mark.parametrize("picture", [
        None,
        {"displayImage": "urn:li:digitalmediaAsset:1"},
        {"displayImage~": {"elements": []}},
        {"displayImage~": {"paging": {}}},
    ])
    def test_missing_picture_chain_is_omitted(self, profile_data, picture):
        if picture is None:
            del profile_data["profilePicture"]
        else:
            profile_data["profilePicture"] = picture

        profile = parse_profile(json.dumps(profile_data))

        assert profile.picture_url is None
        assert profile.id == "123456"


class TestParseEmail:

    def test_email(self, email_json):
        assert parse_email(email_json) == "mal@blue.sun"

    def test_minimal_shape(self):
        assert parse_email('{"elements":[{"handle~":{"emailAddress":"mal@blue.sun"}}]}') == "mal@blue.sun"

    def test_no_elements_raises(self):
        with pytest.raises(IndexError):
            parse_email('{"elements": []}')

    def test_missing_handle_raises(self):
        with pytest.raises(KeyError):
            parse_email('{"elements": [{"handle": "urn:li:emailAddress:1"}]}')

    def test_empty_body_raises(self):
        with pytest.raises(KeyError):
            parse_email("{}")


def test_parse_upload_registration():
    raw = json.dumps({
        "value": {
            "uploadMechanism": {
                "com.linkedin.digitalmedia.uploading.MediaUploadHttpRequest": {
                    "headers": {},
                    "uploadUrl": "https://api.linkedin.com/mediaUpload/C5522AQGTYER3k3ByHQ/feedshare-uploadedImage/0",
                }
            },
            "mediaArtifact": "urn:li:digitalmediaMediaArtifact:(urn:li:digitalmediaAsset:C5522AQGTYER3k3ByHQ,urn:li:digitalmediaMediaArtifactClass:feedshare-uploadedImage)",
            "asset": "urn:li:digitalmediaAsset:C5522AQGTYER3k3ByHQ",
        }
    })

    registration = parse_upload_registration(raw)

    assert registration.upload_url == "https://api.linkedin.com/mediaUpload/C5522AQGTYER3k3ByHQ/feedshare-uploadedImage/0"
    assert registration.asset == "urn:li:digitalmediaAsset:C5522AQGTYER3k3ByHQ"


def test_share_id_reads_restli_header():
    response = httpx.Response(201, headers={"X-RestLi-Id": "urn:li:share:6844785523593134080"})

    assert share_id(response) == "urn:li:share:6844785523593134080"
    assert share_id(httpx.Response(201)) is None
