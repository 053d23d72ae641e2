from typing import List, Dict
import logging

from fastapi import APIRouter, Depends, status

from wellness_journal.core.database import JsonDatabase
from wellness_journal.core.dependency import get_db
from wellness_journal.core.errors import InternalError, JournalError
from wellness_journal.entries.schemas import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryBase,
)
from wellness_journal.entries.db import (
    create_entry,
    delete_entry,
    get_entries_by_date_range,
    get_entry,
    list_entries,
    update_entry,
)

router = APIRouter(prefix="/api/entries", tags=["Entries"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[JournalEntryBase],
    summary="Get all journal entries",
    description="Retrieve every journal entry, most recent first.",
    responses={
        200: {"description": "Journal entries retrieved successfully."},
        500: {"description": "Failed to retrieve journal entries."},
    },
)
def list_entries_route(db: JsonDatabase = Depends(get_db)) -> List[JournalEntryBase]:
    try:
        return list_entries(db)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error fetching entries: {e}")
        raise InternalError("Error fetching entries") from e


@router.get(
    "/date-range/{start}/{end}",
    response_model=List[JournalEntryBase],
    summary="Get entries in a date range",
    description="Retrieve entries created between two dates (inclusive), most recent first.",
    responses={
        200: {"description": "Journal entries retrieved successfully."},
        400: {"description": "Invalid date."},
        500: {"description": "Failed to retrieve journal entries."},
    },
)
def entries_by_date_range_route(
    start: str,
    end: str,
    db: JsonDatabase = Depends(get_db),
) -> List[JournalEntryBase]:
    try:
        return get_entries_by_date_range(db, start, end)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error fetching entries between {start} and {end}: {e}")
        raise InternalError("Error fetching entries by date range") from e


@router.get(
    "/{entry_id}",
    response_model=JournalEntryBase,
    summary="Get an entry by ID",
    description="Retrieve a specific journal entry by its unique identifier.",
    responses={
        200: {"description": "Entry retrieved successfully."},
        404: {"description": "Entry not found."},
        500: {"description": "Failed to retrieve entry."},
    },
)
def read_entry_route(entry_id: str, db: JsonDatabase = Depends(get_db)) -> JournalEntryBase:
    try:
        return get_entry(db, entry_id)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error retrieving entry {entry_id}: {e}")
        raise InternalError("Error fetching entry") from e


@router.post(
    "",
    response_model=JournalEntryBase,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new entry",
    description="Create a journal entry. Only content is required.",
    responses={
        201: {"description": "Entry created successfully."},
        400: {"description": "Content is required."},
        500: {"description": "Failed to create entry."},
    },
)
def create_entry_route(
    entry: JournalEntryCreate,
    db: JsonDatabase = Depends(get_db),
) -> JournalEntryBase:
    try:
        return create_entry(db, entry)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error creating entry: {e}")
        raise InternalError("Error creating entry") from e


@router.put(
    "/{entry_id}",
    response_model=JournalEntryBase,
    summary="Update an entry",
    description="Partially update an entry. Only the supplied fields change.",
    responses={
        200: {"description": "Entry updated successfully."},
        400: {"description": "Invalid field value."},
        404: {"description": "Entry not found."},
        500: {"description": "Failed to update entry."},
    },
)
def update_entry_route(
    entry_id: str,
    entry: JournalEntryUpdate,
    db: JsonDatabase = Depends(get_db),
) -> JournalEntryBase:
    try:
        return update_entry(db, entry_id, entry)
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error updating entry {entry_id}: {e}")
        raise InternalError("Error updating entry") from e


@router.delete(
    "/{entry_id}",
    response_model=Dict[str, str],
    summary="Delete an entry",
    description="Delete a specific journal entry by its ID.",
    responses={
        200: {"description": "Entry deleted successfully."},
        404: {"description": "Entry not found."},
        500: {"description": "Failed to delete entry."},
    },
)
def delete_entry_route(entry_id: str, db: JsonDatabase = Depends(get_db)) -> Dict[str, str]:
    try:
        delete_entry(db, entry_id)
        return {"message": "Entry deleted successfully"}
    except JournalError:
        raise
    except Exception as e:
        logger.error(f"Error deleting entry {entry_id}: {e}")
        raise InternalError("Error deleting entry") from e
