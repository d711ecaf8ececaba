from payment_payload.payload.validation import create_validated, fix_length
from payment_payload.schemas.customer import AddressSnapshot, CustomerSnapshot, Salutation
from payment_payload.schemas.transaction import Address

def first_filled(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None

def display_name(salutation: Salutation | None) -> str | None:
    if salutation is None:
        return None
    return salutation.display_name or None

def resolve_address(address: AddressSnapshot, customer: CustomerSnapshot) -> Address:
    """
    Gateway address for a billing or shipping address of the customer.

    Names, company and salutation fall back to the customer record when the
    address leaves them empty. Everything else is taken from the address as is.
    """
    family_name = first_filled(address.last_name, customer.last_name)
    given_name = first_filled(address.first_name, customer.first_name)
    organization_name = first_filled(address.company, customer.company)
    salutation = first_filled(display_name(address.salutation), display_name(customer.salutation))

    return create_validated(
        Address,
        "Address",
        city=fix_length(address.city, 100) if address.city else None,
        country=address.country.iso if address.country else None,
        email_address=fix_length(address.email, 254) if address.email else None,
        family_name=fix_length(family_name, 100),
        given_name=fix_length(given_name, 100),
        organization_name=fix_length(organization_name, 100),
        phone_number=fix_length(address.phone_number, 100) if address.phone_number else None,
        postcode=fix_length(address.zipcode, 40) if address.zipcode else None,
        postal_state=address.country_state.short_code if address.country_state else None,
        salutation=fix_length(salutation, 20),
        street=fix_length(address.street, 300) if address.street else None
    )
