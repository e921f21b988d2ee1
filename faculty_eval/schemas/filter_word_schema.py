from pydantic import BaseModel, ConfigDict, Field, field_validator

class FilterWordCreate(BaseModel):
    word: str = Field(..., min_length=1, max_length=100)

    @field_validator("word")
    @classmethod
    def normalize_word(cls, value: str) -> str:
        word = value.strip().lower()
        if not word:
            raise ValueError("Từ lọc không được để trống.")
        return word

class FilterWord(BaseModel):
    filter_word_id: int
    word: str

    model_config = ConfigDict(from_attributes=True)
