import logging
from typing import Dict, Tuple

from sqlalchemy.orm import Session

from catalog_api.errors import ValidationError
from catalog_api.repositories.account_repo import DistributorRepository, MasterRepository
from catalog_api.security import hash_password, needs_rehash, verify_password
from catalog_api.services.session_store import CENTRAL_ADMIN, DISTRIBUTOR, SessionStore

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    def __init__(self, db: Session, store: SessionStore):
        self.db = db
        self.store = store
        self.masters = MasterRepository(db)
        self.distributors = DistributorRepository(db)

    def register(self, email: str, password: str, distributor_name: str, country: str) -> int:
        hashed = hash_password(password)
        d = self.distributors.register(distributor_name, email, hashed, country)
        log.info("Registered distributor id=%s country=%s", d.id, country)
        return d.id

    def login(self, email: str, password: str) -> Tuple[str, Dict]:
        """
        Authenticate against the admin table first, then distributors.
        Returns (session token, response body). Unknown email and wrong password
        raise the same ValidationError.
        """
        master = self.masters.get_by_email(email)
        if master and verify_password(password, master.password):
            if needs_rehash(master.password):
                # legacy plaintext row; store it hashed from now on
                self.masters.set_password_hash(master, hash_password(password))
            token = self.store.create(master.id, CENTRAL_ADMIN)
            log.info("Central admin login id=%s", master.id)
            return token, {
                "message": "Login successful",
                "userRole": CENTRAL_ADMIN,
                "adminId": master.id,
                "email": master.email,
            }

        distributor = self.distributors.get_by_email(email)
        if distributor and verify_password(password, distributor.password):
            token = self.store.create(
                distributor.id,
                DISTRIBUTOR,
                distributor_name=distributor.name,
                country_name=distributor.country_name,
            )
            log.info("Distributor login id=%s", distributor.id)
            return token, {
                "message": "Login successful",
                "userRole": DISTRIBUTOR,
                "distributorId": distributor.id,
                "distributorName": distributor.name,
                "email": distributor.email,
                "countryName": distributor.country_name,
            }

        log.info("Failed login attempt for %s", email)
        raise ValidationError(INVALID_CREDENTIALS)
