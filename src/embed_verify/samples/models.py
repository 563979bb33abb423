from pydantic import BaseModel


class SamplePair(BaseModel):
    text: str
    image_url: str | None = None

    class Config:
        extra = "forbid"
        frozen = True


class SampleSet(BaseModel):
    name: str
    description: str
    samples: list[SamplePair]

    class Config:
        extra = "forbid"
        frozen = True

    @property
    def texts(self) -> list[str]:
        return [s.text for s in self.samples]

    @property
    def image_urls(self) -> list[str | None]:
        return [s.image_url for s in self.samples]
