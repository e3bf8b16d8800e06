"""Tests for the multi-step actions behind the MCP tools."""
import json

import httpx

from linkedin_v2.linkedin import actions
from linkedin_v2.linkedin.models import ShareRequest

UPLOAD_URL = "https://api.linkedin.com/mediaUpload/C5522AQGTYER3k3ByHQ/feedshare-uploadedImage/0"
ASSET = "urn:li:digitalmediaAsset:C5522AQGTYER3k3ByHQ"


def _linkedin(request: httpx.Request) -> httpx.Response:
    url = str(request.url)
    if request.method == "GET" and request.url.path == "/v2/me":
        return httpx.Response(200, json={"id": "123456"})
    if url.endswith("/v2/assets?action=registerUpload"):
        return httpx.Response(200, json={
            "value": {
                "uploadMechanism": {
                    "com.linkedin.digitalmedia.uploading.MediaUploadHttpRequest": {"uploadUrl": UPLOAD_URL}
                },
                "asset": ASSET,
            }
        })
    if url == UPLOAD_URL:
        return httpx.Response(201)
    if url.endswith("/v2/ugcPosts"):
        return httpx.Response(201, json={}, headers={"x-restli-id": "urn:li:share:42"})
    return httpx.Response(404)


def test_create_image_share_reads_file_and_shares_asset(mock_api, tmp_path):
    image_path = tmp_path / "firefly.png"
    image_path.write_bytes(b"\x89PNG\r\n\x1a\n")
    client, requests = mock_api(_linkedin)

    post_id = actions.create_image_share(client, ShareRequest(comment="Shiny", title="Serenity"), image_path)

    assert post_id == "urn:li:share:42"
    assert [str(r.url).split("?")[0] for r in requests] == [
        "https://api.linkedin.com/v2/me",
        "https://api.linkedin.com/v2/assets",
        UPLOAD_URL,
        "https://api.linkedin.com/v2/ugcPosts",
    ]
    assert requests[2].content == b"\x89PNG\r\n\x1a\n"
    assert requests[2].headers["content-type"] == "application/octet-stream"
    content = json.loads(requests[3].content)["specificContent"]["com.linkedin.ugc.ShareContent"]
    assert content["shareMediaCategory"] == "IMAGE"
    assert content["media"] == [{"status": "READY", "media": ASSET, "title": {"text": "Serenity"}}]


def test_create_share_uses_profile_id(mock_api):
    client, requests = mock_api(_linkedin)

    post_id = actions.create_share(client, ShareRequest(comment="Hello"))

    assert post_id == "urn:li:share:42"
    assert json.loads(requests[1].content)["author"] == "urn:li:person:123456"


def test_format_profile_marks_missing_fields(mock_api):
    client, _ = mock_api(_linkedin)

    text = actions.format_profile(client)

    assert "- ID: 123456" in text
    assert "- First Name: N/A" in text
