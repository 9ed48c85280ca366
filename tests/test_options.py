# -*- coding: utf-8 -*-
import pytest

from pyconnurl.driver import DriverDescriptor
from pyconnurl.error import NotSupportedError, ProgrammingError
from pyconnurl.options import build_driver_options, build_mongodb_driver_options, normalize_options


class TestBuildDriverOptions:
    """Test cases for build_driver_options"""

    def test_url_fields_merged_into_options(self):
        """Test that parsed fields are added and unrelated options kept"""
        result = build_driver_options({"driverField": "x", "url": "s://h:1/d"})
        assert result["host"] == "h"
        assert result["port"] == 1
        assert result["database"] == "d"
        assert result["driverField"] == "x"
        assert result["url"] == "s://h:1/d"

    def test_url_fields_override_options(self):
        """Test that url fields take precedence over explicit options"""
        result = build_driver_options({"host": "old", "port": 5, "url": "s://new:6/d"})
        assert result["host"] == "new"
        assert result["port"] == 6

    def test_absent_url_fields_do_not_override(self):
        """Test that fields missing from the url keep their option values"""
        result = build_driver_options({"database": "keep", "port": 9, "url": "s://h"})
        assert result["host"] == "h"
        assert result["database"] == "keep"
        assert result["port"] == 9

    def test_no_url_returns_copy(self):
        """Test that options without url are copied unchanged"""
        options = {"a": 1}
        result = build_driver_options(options)
        assert result == {"a": 1}
        assert result is not options

    def test_none_url_returns_copy(self):
        """Test that a None url is treated as no url"""
        options = {"a": 1, "url": None}
        assert build_driver_options(options) == {"a": 1, "url": None}

    def test_explicit_url_argument(self):
        """Test that the url argument is used instead of options['url']"""
        result = build_driver_options({"a": 1, "url": "s://ignored/x"}, url="t://h:2/d")
        assert result["scheme"] == "t"
        assert result["host"] == "h"
        assert result["port"] == 2
        assert result["a"] == 1

    def test_options_not_modified(self):
        """Test that the caller's options are left untouched"""
        options = {"url": "s://u:p@h:1/d", "extra": [1, 2]}
        result = build_driver_options(options)
        assert options == {"url": "s://u:p@h:1/d", "extra": [1, 2]}
        # Shallow copy
        assert result["extra"] is options["extra"]

    def test_use_sid(self):
        """Test that the database name is also exposed as sid"""
        result = build_driver_options({"url": "oracle://u:p@h:1521/XE"}, use_sid=True)
        assert result["sid"] == "XE"
        assert result["database"] == "XE"

    def test_use_sid_without_database(self):
        """Test that sid is not set when the url has no database"""
        result = build_driver_options({"url": "oracle://u:p@h:1521"}, use_sid=True)
        assert "sid" not in result

    def test_sid_not_set_by_default(self):
        """Test that sid is only added on request"""
        result = build_driver_options({"url": "oracle://u:p@h:1521/XE"})
        assert "sid" not in result

    def test_no_none_values_from_url(self):
        """Test that parsed fields are never stored as None"""
        result = build_driver_options({"url": "s://h"})
        assert all(value is not None for value in result.values())
        assert "port" not in result
        assert "database" not in result

    def test_merge_is_idempotent(self, base_options):
        """Test that merging a merged result again changes nothing"""
        merged = build_driver_options(base_options)
        assert build_driver_options(merged) == merged

    def test_malformed_url_does_not_raise(self):
        """Test that a malformed url yields partial options"""
        result = build_driver_options({"url": "not a url"})
        assert result["scheme"] == "not a url"
        assert result["url"] == "not a url"


class TestBuildMongoDBDriverOptions:
    """Test cases for build_mongodb_driver_options"""

    def test_replica_set_options(self):
        """Test replica set fields in the merged options"""
        result = build_mongodb_driver_options({"url": "mongodb://h1:27017,h2:27018/db?replicaSet=rs0"})
        assert result["hostReplicaSet"] == "h1:27017,h2:27018"
        assert result["replicaSet"] == "rs0"
        assert result["database"] == "db"
        assert "host" not in result
        assert "port" not in result

    def test_replica_set_keeps_explicit_host(self):
        """Test that host options survive when the url names a replica set"""
        result = build_mongodb_driver_options(
            {"host": "fallback", "port": 27017, "url": "mongodb://h1:1,h2:2/db?replicaSet=rs0"}
        )
        assert result["host"] == "fallback"
        assert result["port"] == 27017
        assert result["hostReplicaSet"] == "h1:1,h2:2"

    def test_standalone_options(self):
        """Test options from a url without replica set"""
        result = build_mongodb_driver_options({"url": "mongodb://h:27017/db"})
        assert result["host"] == "h"
        assert result["port"] == 27017
        assert "hostReplicaSet" not in result
        assert "replicaSet" not in result

    def test_no_url_returns_copy(self):
        """Test that options without url are copied unchanged"""
        options = {"appname": "x"}
        result = build_mongodb_driver_options(options)
        assert result == options
        assert result is not options

    def test_use_sid(self):
        """Test sid duplication for the MongoDB variant"""
        result = build_mongodb_driver_options({"url": "mongodb://h:27017/db"}, use_sid=True)
        assert result["sid"] == "db"

    def test_merge_is_idempotent(self, mongodb_options):
        """Test that merging a merged result again changes nothing"""
        merged = build_mongodb_driver_options(mongodb_options)
        assert build_mongodb_driver_options(merged) == merged
        assert merged["appname"] == "pyconnurl-tests"


class TestNormalizeOptions:
    """Test cases for normalize_options"""

    def test_driver_from_type(self):
        """Test that the driver is taken from options['type']"""
        result = normalize_options({"type": "oracle", "url": "oracle://u:p@h:1521/ORCL"})
        assert result["sid"] == "ORCL"
        assert result["type"] == "oracle"

    def test_mongodb_driver_uses_replica_set_parser(self):
        """Test that MongoDB options go through the replica set pipeline"""
        result = normalize_options({"type": "mongodb", "url": "mongodb://h1:1,h2:2/db?replicaSet=rs0"})
        assert result["hostReplicaSet"] == "h1:1,h2:2"
        assert result["replicaSet"] == "rs0"

    def test_generic_driver_ignores_replica_set(self):
        """Test that non-MongoDB drivers use the generic pipeline"""
        result = normalize_options({"url": "postgres://h:5432/db?replicaSet=rs0"}, driver="postgres")
        assert result["host"] == "h"
        assert "replicaSet" not in result
        assert "sid" not in result

    def test_driver_descriptor(self):
        """Test normalization with an explicit descriptor"""
        driver = DriverDescriptor("custom", use_sid=True)
        result = normalize_options({"url": "custom://h/svc"}, driver)
        assert result["sid"] == "svc"

    def test_driver_name_case_insensitive(self):
        """Test driver names are matched case-insensitively"""
        result = normalize_options({"type": "MongoDB", "url": "mongodb://h:1/db"})
        assert result["host"] == "h"

    def test_unknown_driver(self):
        """Test that an unknown driver raises"""
        with pytest.raises(NotSupportedError):
            normalize_options({"type": "nosuchdb", "url": "x://h/d"})

    def test_missing_driver(self):
        """Test that options without type and no driver raise"""
        with pytest.raises(ProgrammingError):
            normalize_options({"url": "x://h/d"})
