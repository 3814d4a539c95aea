import attrs


@attrs.frozen
class Registrant:
    """Display fields of the user running a registration"""

    user_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str = ''

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()
