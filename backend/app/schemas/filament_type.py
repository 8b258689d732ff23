from pydantic import BaseModel, Field


class FilamentTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class FilamentTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
