from typing import Optional

from catalog_api.schemas.catalogue_schema import Payload


class RegisterIn(Payload):
    email: Optional[str] = None
    password: Optional[str] = None
    distributorName: Optional[str] = None
    country: Optional[str] = None


class LoginIn(Payload):
    email: Optional[str] = None
    password: Optional[str] = None
