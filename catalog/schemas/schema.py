from pydantic import BaseModel


class TableRowCount(BaseModel):
    table: str
    rows: int
