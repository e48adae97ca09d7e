from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------- Requests ----------
# Missing fields fall back to empty values so the admission core reports them
# as invalid fields rather than the framework rejecting the body outright.
# Present fields must already have the right JSON type; nothing is coerced.
class ClassCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    name: str = Field("", validation_alias=AliasChoices("name", "className"))
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")
    capacity: int = 0


class BookRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    member_name: str = Field("", alias="memberName")
    date: str = ""
    class_name: str = Field("", alias="className")


# ---------- Stored entities ----------
class ClassDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = 0
    # older snapshots stored the name under "className"
    name: str = Field(validation_alias=AliasChoices("name", "className"))
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    capacity: int


class BookingRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = 0
    member_name: str = Field(alias="memberName")
    date: str
    class_name: str = Field(alias="className")


# ---------- Responses ----------
class BookingResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking: BookingRecord
    available_slots: int = Field(alias="availableSlots")
