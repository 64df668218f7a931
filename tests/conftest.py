import os
import tempfile

import pytest

# Keep test logs out of the project tree; must be set before schemabridge is imported
os.environ.setdefault("SCHEMABRIDGE_LOGS_DIR", tempfile.mkdtemp(prefix="schemabridge-logs-"))

from schemabridge.services.ddl_translation import Column  # noqa: E402


MYSQL_USERS_DDL = """CREATE TABLE `users` (
  `id` bigint(20) NOT NULL AUTO_INCREMENT,
  `name` varchar(100) DEFAULT NULL COMMENT 'display name',
  `price` decimal(10,2) NOT NULL DEFAULT '0.00',
  PRIMARY KEY (`id`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='users table'"""

DORIS_USERS_DDL = """CREATE TABLE `users` (
  `id` bigint NOT NULL COMMENT "",
  `name` string NULL COMMENT "display name",
  `flag` boolean NULL
) ENGINE=OLAP
UNIQUE KEY(`id`)
COMMENT 'users table'
DISTRIBUTED BY HASH(`id`) BUCKETS 10
PROPERTIES (
"replication_allocation" = "tag.location.default: 1"
)"""


@pytest.fixture
def mysql_users_ddl():
    return MYSQL_USERS_DDL


@pytest.fixture
def doris_users_ddl():
    return DORIS_USERS_DDL


@pytest.fixture
def user_columns():
    return [
        Column(name="id", type="BIGINT(20)", nullable=False, is_primary_key=True),
        Column(name="name", type="VARCHAR(100)", length=100, nullable=True, comment="display name"),
    ]


@pytest.fixture
def doris_user_columns():
    return [
        Column(name="id", type="BIGINT", nullable=False, is_primary_key=True),
        Column(name="name", type="STRING", nullable=True, comment="display name"),
        Column(name="flag", type="BOOLEAN", nullable=True),
    ]
