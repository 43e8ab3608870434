import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from catalog_api.errors import ConflictError
from catalog_api.models.distributor import Distributor
from catalog_api.models.master import Master
from catalog_api.repositories.base_repo import TableRepository
from catalog_api.security import hash_password

log = logging.getLogger(__name__)


class MasterRepository(TableRepository):
    model = Master
    fetch_error = "Database error during login"

    def get_by_email(self, email: str) -> Optional[Master]:
        with self.guarded(self.fetch_error):
            return self.db.query(Master).filter(Master.email == email).first()

    def set_password_hash(self, master: Master, hashed: str):
        with self.guarded(self.fetch_error):
            master.password = hashed
            self.db.commit()

    def ensure(self, email: str, password: str) -> bool:
        """Create the admin account if missing. Returns True when a row was added."""
        if self.get_by_email(email):
            return False
        self.create(email=email, password=hash_password(password))
        return True


class DistributorRepository(TableRepository):
    model = Distributor
    fetch_error = "Failed to fetch distributor"
    add_error = "Error during registration"

    def get_by_email(self, email: str) -> Optional[Distributor]:
        with self.guarded("Database error during login"):
            return self.db.query(Distributor).filter(Distributor.email == email).first()

    def register(self, name: str, email: str, password_hash: str, country_name: str) -> Distributor:
        d = Distributor(name=name, email=email, password=password_hash, country_name=country_name)
        with self.guarded(self.add_error):
            self.db.add(d)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                log.info("Registration rejected, email already in use: %s", email)
                raise ConflictError("Email already registered") from exc
            self.db.refresh(d)
            return d
