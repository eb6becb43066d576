from pydantic import ValidationError
from errors import InvalidRequestError
from models.contractor.contractor import Contractor
from models.contractor.contractor_payload import ContractorPayload
from stores.booking_store import ContractorStore


class ContractorService:

    @staticmethod
    def list_contractors(contractor_store: ContractorStore) -> list[Contractor]:
        return contractor_store.list()

    @staticmethod
    def create_contractor(payload: ContractorPayload, contractor_store: ContractorStore) -> Contractor:
        try:
            contractor = Contractor(name=payload.name, category=payload.category, color=payload.color)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid contractor: {e}") from e

        # Names are the join key to occupant labels, so keep them unique regardless of case
        taken = {existing.name.casefold() for existing in contractor_store.list()}
        if contractor.name.casefold() in taken:
            raise InvalidRequestError(f"Contractor '{contractor.name}' already exists")

        created = contractor_store.create(contractor)
        print(f"Added contractor '{created.name}' with colour {created.color}")
        return created

    @staticmethod
    def update_color(contractor_id: str, color: str, contractor_store: ContractorStore) -> Contractor:
        try:
            return contractor_store.update_color(contractor_id, color)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid contractor colour: {e}") from e

    @staticmethod
    def delete_contractor(contractor_id: str, contractor_store: ContractorStore) -> None:
        contractor_store.delete(contractor_id)
