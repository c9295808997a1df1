"""
Tests for MetadataStore.

Covers wholesale replace from headers, dirty tracking, delete-at conversion
and header rendering.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from swift_objects.metadata import MetadataStore, from_timestamp, to_timestamp


DELETE_AT = datetime(2010, 10, 10, 10, 10, 10, tzinfo=timezone.utc)


class TestApplyHeaders:
    """Server state replaces local state wholesale."""

    def test_all_fields_populated(self):
        store = MetadataStore()
        store.apply_headers({
            "Content-Type": "text/html",
            "Content-Disposition": "attachment",
            "Content-Encoding": "gzip",
            "Content-Length": "512000",
            "ETag": "d41d8cd98f00b204e9800998ecf8427e",
            "X-Delete-At": str(to_timestamp(DELETE_AT)),
            "X-Object-Manifest": "segments/video",
            "Last-Modified": "Sun, 10 Oct 2010 10:10:10 GMT",
            "X-Object-Meta-Owner": "alice",
        })

        assert store.content_type == "text/html"
        assert store.content_disposition == "attachment"
        assert store.content_encoding == "gzip"
        assert store.content_length == 512000
        assert store.etag == "d41d8cd98f00b204e9800998ecf8427e"
        assert store.delete_at == DELETE_AT
        assert store.manifest == "segments/video"
        assert store.last_modified == DELETE_AT
        assert store.custom == {"owner": "alice"}

    def test_header_names_are_case_insensitive(self):
        store = MetadataStore()
        store.apply_headers({"content-type": "a/b", "x-delete-at": "1286705410", "X-OBJECT-META-Color": "red"})

        assert store.content_type == "a/b"
        assert to_timestamp(store.delete_at) == 1286705410
        assert store.custom == {"color": "red"}

    def test_missing_headers_clear_fields(self):
        """A second response without headers resets every field."""
        store = MetadataStore()
        store.apply_headers({"Content-Type": "text/plain", "X-Delete-At": "1286705410", "X-Object-Meta-A": "1"})
        store.apply_headers({})

        assert store.content_type is None
        assert store.delete_at is None
        assert store.content_length is None
        assert store.custom == {}

    def test_apply_clears_dirty_flags(self):
        store = MetadataStore()
        store.set_field("content_type", "text/plain")
        store.apply_headers({})
        assert not store.is_dirty()


class TestDirtyTracking:
    """Setters mark fields dirty; only dirty fields are rendered."""

    def test_new_store_is_clean(self):
        store = MetadataStore()
        assert not store.is_dirty()
        assert store.dirty_headers() == {}

    @pytest.mark.parametrize("field,header", [
        ("content_type", "Content-Type"),
        ("content_disposition", "Content-Disposition"),
        ("content_encoding", "Content-Encoding"),
    ])
    def test_string_field_rendered(self, field, header):
        store = MetadataStore()
        store.set_field(field, "foo")
        assert store.dirty_headers() == {header: "foo"}

    def test_clean_fields_not_rendered(self):
        store = MetadataStore()
        store.apply_headers({"Content-Type": "text/plain", "Content-Encoding": "gzip"})
        store.set_field("content_encoding", "br")

        assert store.dirty_headers() == {"Content-Encoding": "br"}

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="Unknown writable metadata field"):
            MetadataStore().set_field("etag", "abc")

    @pytest.mark.parametrize("field", ["content_type", "content_disposition", "content_encoding"])
    def test_clearing_field_rejected(self, field):
        store = MetadataStore()
        store.apply_headers({"Content-Type": "text/plain"})

        with pytest.raises(ValueError, match="cannot be cleared"):
            store.set_field(field, None)

        assert not store.is_dirty()
        assert store.content_type == "text/plain"

    def test_delete_at_rendered_as_epoch_seconds(self):
        store = MetadataStore()
        store.set_delete_at(DELETE_AT)
        assert store.dirty_headers() == {"X-Delete-At": "1286705410"}

    def test_custom_metadata_always_rendered_in_full(self):
        """Swift POST replaces custom metadata, so all keys travel together."""
        store = MetadataStore()
        store.apply_headers({"X-Object-Meta-Owner": "alice"})
        store.merge_custom({"Color": "red"})

        assert store.dirty_headers() == {"X-Object-Meta-owner": "alice", "X-Object-Meta-color": "red"}

    def test_custom_keys_are_case_insensitive(self):
        store = MetadataStore()
        store.merge_custom({"Color": "red"})
        store.merge_custom({"COLOR": "blue"})
        assert store.custom == {"color": "blue"}

    def test_mark_clean(self):
        store = MetadataStore()
        store.set_field("content_type", "text/plain")
        store.mark_clean()
        assert not store.is_dirty()
        assert store.content_type == "text/plain"


class TestDeleteAt:
    """Absolute and relative scheduled deletion."""

    def test_delete_after_stores_absolute_time(self):
        store = MetadataStore()
        store.set_delete_after(100, now=1_000_000.7)
        assert store.delete_at == from_timestamp(1_000_100)
        assert "delete_at" in store.dirty_fields

    def test_delete_after_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            MetadataStore().set_delete_after(-1)

    def test_delete_at_truncated_to_seconds(self):
        store = MetadataStore()
        store.set_delete_at(DELETE_AT.replace(microsecond=999_999))
        assert store.delete_at == DELETE_AT

    def test_timestamp_helpers(self):
        assert from_timestamp("1286705410") == DELETE_AT
        assert to_timestamp(DELETE_AT) == 1286705410
