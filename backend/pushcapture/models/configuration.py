"""
Push configuration storage model.
"""
from sqlalchemy import Column, Integer, Table, Text
from pushcapture.constants import CONFIGURATION_TABLE
from pushcapture.database import Base


# Single-row table; booleans are stored as 0/1 integers.
# Declared as a Core table because the row has no key of its own.
configuration_table = Table(
    CONFIGURATION_TABLE,
    Base.metadata,
    Column("appid", Text),
    Column("piurl", Text),
    Column("ppgurl", Text),
    Column("usesdkaspi", Integer),
    Column("usingpublicppg", Integer),
    Column("launchapp", Integer),
)
