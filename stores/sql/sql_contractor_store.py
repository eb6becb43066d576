from __future__ import annotations
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from errors import ContractorNotFoundError, PersistenceError
from models.contractor.contractor import Contractor
from stores.sql.tables import ContractorRow


def convert_row_to_contractor(row: ContractorRow) -> Contractor:
    return Contractor(id=row.id, name=row.name, category=row.category, color=row.color)


class SqlContractorStore:

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list(self) -> list[Contractor]:
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(ContractorRow).order_by(ContractorRow.name))
                return [convert_row_to_contractor(row) for row in rows]
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch contractors: {e}")
            raise PersistenceError(f"Failed to fetch contractors: {e}") from e

    def create(self, contractor: Contractor) -> Contractor:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = ContractorRow(
                        name=contractor.name,
                        category=contractor.category,
                        color=contractor.color
                    )
                    if contractor.id:
                        row.id = contractor.id
                    session.add(row)
                    session.flush()
                return convert_row_to_contractor(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to create contractor '{contractor.name}': {e}")
            raise PersistenceError(f"Failed to create contractor: {e}") from e

    def update_color(self, contractor_id: str, color: str) -> Contractor:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.get(ContractorRow, contractor_id)
                    if row is None:
                        raise ContractorNotFoundError(f"Contractor '{contractor_id}' not found")
                    updated = Contractor.model_validate({**convert_row_to_contractor(row).model_dump(), "color": color})
                    row.color = updated.color
                return updated
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to update contractor {contractor_id}: {e}")
            raise PersistenceError(f"Failed to update contractor: {e}") from e

    def delete(self, contractor_id: str) -> None:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.get(ContractorRow, contractor_id)
                    if row is None:
                        raise ContractorNotFoundError(f"Contractor '{contractor_id}' not found")
                    session.delete(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to delete contractor {contractor_id}: {e}")
            raise PersistenceError(f"Failed to delete contractor: {e}") from e
