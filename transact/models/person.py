"""Staff record data model"""

from pydantic import BaseModel, Field, field_validator


class Person(BaseModel):
    """Staff member that transactions are attributed to"""

    employee_id: int = Field(..., gt=0, description="Unique employee number")
    name: str = Field(..., min_length=1, description="Full name")
    phone: str = Field(..., pattern=r"^\d{3,}$", description="Phone number, digits only")
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$", description="Email address")
    address: str = Field("", description="Postal address")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "employee_id": 1001,
                "name": "Alex Yeoh",
                "phone": "87438807",
                "email": "alexyeoh@example.com",
                "address": "Blk 30 Geylang Street 29, #06-40"
            }
        }

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value

    def is_same_entry(self, other: "Person") -> bool:
        """Two staff records are the same entry when they share an employee id"""
        if other is self:
            return True
        return isinstance(other, Person) and other.employee_id == self.employee_id

    def __str__(self) -> str:
        return f"{self.name} (#{self.employee_id})"
