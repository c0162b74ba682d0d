from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from discord_structs.structs.embed import Embed
from discord_structs.structs.message import (
    CallMessage,
    GroupChannelNameChangeMessage,
    Message,
)
from discord_structs.structs.reaction import Reaction
from discord_structs.structs.record import Record, to_record


def test_getters_read_live_record():
    raw = Record(id="1", type=0, content="hi")
    msg = Message.from_record(raw)

    raw["content"] = "changed"
    raw["edited_timestamp"] = "2024-01-01T00:00:00"

    assert msg.content == "changed"
    assert msg.edited is True


def test_missing_fields_read_as_none():
    raw = Record(id="1", type=0)
    msg = Message.from_record(raw)

    assert msg.content is None
    assert msg.attachments is None
    assert msg.nick is None
    assert msg.edited is False
    assert msg.embeds == []
    assert msg.reactions == []
    assert raw == {"id": "1", "type": 0}


def test_attribute_style_records_are_supported():
    class _Raw:
        pass

    raw = _Raw()
    raw.id = "9"
    raw.type = 4
    raw.content = "new name"

    msg = Message.from_record(raw)

    assert isinstance(msg, GroupChannelNameChangeMessage)
    assert msg.new_name == "new name"
    assert msg.nonce is None


def test_default_message_field_mapping():
    msg = Message.from_record(
        Record(
            id="1",
            type=0,
            channel_id="c1",
            color_string="#fff",
            invites=["abc"],
            mentions=["A"],
            mention_roles=["R1"],
            mention_everyone=False,
            tts=True,
            pinned=True,
        )
    )

    assert msg.channel_id == "c1"
    assert msg.colour_string == "#fff"
    assert msg.invite_codes == ["abc"]
    assert msg.mention_ids == ["A"]
    assert msg.mention_role_ids == ["R1"]
    assert msg.mention_everyone is False
    assert msg.tts is True
    assert msg.pinned is True


def test_webhook_exposes_raw_author():
    author = {"id": "W", "username": "hook"}
    msg = Message.from_record(Record(id="1", type=0, webhook_id="W", author=author))

    assert msg.webhook is author
    assert Message.from_record(Record(id="2", type=0, author=author)).webhook is None


def test_created_at_decodes_snowflake():
    msg = Message.from_record(Record(id="175928847299117063", type=0))

    expected = datetime(2016, 4, 30, 11, 18, 25, 796000, tzinfo=timezone.utc)
    assert abs(msg.created_at - expected) < timedelta(milliseconds=1)
    assert Message.from_record(Record(id="abc", type=0)).created_at is None
    assert Message.from_record(Record(type=0)).created_at is None


def test_call_message_fields():
    msg = Message.from_record(
        Record(id="1", type=3, mentions=["A"], call={"participants": ["A"], "ended_timestamp": "t"})
    )

    assert isinstance(msg, CallMessage)
    assert msg.ended_timestamp == "t"
    assert msg.mention_ids == ["A"]


def test_call_message_without_call_payload():
    msg = Message.from_record(Record(id="1", type=3))

    assert msg.call is None
    assert msg.ended_timestamp is None


def test_embed_fields():
    embed = Embed(
        Record(title="T", type="rich", description="D", url="u", color=0xFF, fields=[{"name": "n"}]),
        "1",
        "c1",
    )

    assert embed.title == "T"
    assert embed.type == "rich"
    assert embed.description == "D"
    assert embed.colour == 0xFF
    assert embed.fields == [{"name": "n"}]
    assert embed.footer is None
    assert embed.message_id == "1"
    assert embed.channel_id == "c1"


def test_reaction_fields_and_unicode_emoji():
    emoji = SimpleNamespace(id=None, name="🧠")
    reaction = Reaction(Record(count=3, me=True, emoji=emoji), "1", "c1")

    assert reaction.count == 3
    assert reaction.me is True
    # Unicode emoji never need a guild lookup.
    assert reaction.emoji is emoji


def test_to_record_converts_children():
    record = to_record({"id": "1", "embeds": [{"title": "a"}], "reactions": [{"count": 1}]})

    assert isinstance(record, Record)
    assert isinstance(record["embeds"][0], Record)
    assert isinstance(record["reactions"][0], Record)
