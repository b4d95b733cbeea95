from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# 64-bit keys on servers; SQLite only autoincrements a plain INTEGER PRIMARY KEY.
RecordId = BigInteger().with_variant(Integer(), "sqlite")
