from pydantic import BaseModel


class DayBucket(BaseModel):
    name: str
    visitors: int


class DashboardOverviewResponse(BaseModel):
    today: int
    returning: int
    topHost: str
    weekly: list[DayBucket]
