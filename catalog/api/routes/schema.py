from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from catalog.api.deps import get_db
from catalog.schemas.schema import TableRowCount
from catalog.services.catalog import UnknownTableError, count_rows, describe_schema

router = APIRouter(prefix="/schema", tags=["schema"])


@router.get("/tables", response_model=dict[str, list[str]])
def list_tables(db: Session = Depends(get_db)) -> dict[str, list[str]]:
    """Return the physical tables and columns generated for each mapping strategy."""

    return describe_schema(db.connection())


@router.get("/tables/{table_name}/count", response_model=TableRowCount)
def get_table_row_count(table_name: str, db: Session = Depends(get_db)) -> TableRowCount:
    try:
        rows = count_rows(db, table_name)
    except UnknownTableError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return TableRowCount(table=table_name, rows=rows)
