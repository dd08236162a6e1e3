"""Pydantic schemas for APOD responses."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ApodResponse(BaseModel):
    """Single Astronomy Picture of the Day entry."""

    copyright: Optional[str] = None
    date: dt.date
    explanation: str
    hdurl: Optional[str] = None
    media_type: str
    service_version: str
    title: str
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ApodErrorBody(BaseModel):
    """Error object returned by the APOD service itself."""

    code: int
    msg: str
    service_version: str = "unknown"


class GatewayErrorDetail(BaseModel):
    code: str
    message: str


class GatewayErrorBody(BaseModel):
    """Error object returned by the api.nasa.gov gateway (bad key, rate limit)."""

    error: GatewayErrorDetail
