"""Shared test fixtures."""

import pytest

VTT_CONTENT = """WEBVTT

NOTE exported from Microsoft Teams

1
00:00:00.000 --> 00:00:04.500
<v Alice Smith>Welcome everyone to the pricing review.</v>

2
00:00:04.500 --> 00:00:09.250
<v Bob Jones>Thanks. I will send the updated quote tomorrow.</v>

3
00:00:09.250 --> 00:00:12.000
<v Alice Smith>Great, let us follow up on Friday.</v>
"""

TEXT_CONTENT = """[00:00:05] Alice: Good morning, this is the Zoom sync.
[00:01:10] Bob: We need to finalize the contract.

The deadline is Friday: no exceptions.
[00:02:00] Alice: Agreed.
"""

JSON_CONTENT = """{
  "transcript": [
    {"speaker": "Carol", "text": "Let us begin", "start_time": "0", "end_time": "2.5"},
    {"speaker_name": "Dan", "content": "Sounds good", "startTime": 2.5, "endTime": 4},
    {"speaker": "Carol", "text": "   "},
    {"speaker": "Carol", "text": "Next step is legal review", "start_time": 4, "end_time": 7.25}
  ]
}"""


@pytest.fixture
def vtt_content():
    return VTT_CONTENT


@pytest.fixture
def text_content():
    return TEXT_CONTENT


@pytest.fixture
def json_content():
    return JSON_CONTENT
