"""Exceptions raised by the Ramadan scheduling core."""


class MusholaError(Exception):
    """Base class for all errors raised by musholahelper."""


class InvalidAddressError(MusholaError, ValueError):
    """A day, week, weekday or slot address is outside its valid range."""


class InvalidEntryError(MusholaError, ValueError):
    """A submitted value is malformed (negative juz, missing fields, ...)."""


class DuplicateMemberError(MusholaError, ValueError):
    """A member or record with the same id already exists."""

    def __init__(self, member_id: str, collection: str = "roster"):
        super().__init__(f"Duplicate id {member_id!r} in {collection}")
        self.member_id = member_id
        self.collection = collection


class EmptyRosterError(MusholaError):
    """Schedule generation was requested without any active members."""


class StoreError(MusholaError):
    """The schedule store failed to fetch or save a schedule."""
