from pydantic import BaseModel, ConfigDict

class Salutation(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str | None = None

class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    iso: str | None = None

class CountryState(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_code: str | None = None

class AddressSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    salutation: Salutation | None = None
    street: str | None = None
    zipcode: str | None = None
    city: str | None = None
    country: Country | None = None
    country_state: CountryState | None = None
    email: str | None = None
    phone_number: str | None = None

class CustomerSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_number: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    salutation: Salutation | None = None
    billing_address: AddressSnapshot
    shipping_address: AddressSnapshot
