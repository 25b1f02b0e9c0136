# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request bodies. Wire names are camelCase, as the front-end sends them."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

LeadStatus = Literal["nuevo", "contactado", "en seguimiento", "cerrado"]


class PropertyIn(BaseModel):
    id: Optional[str] = None
    title: str
    city: str = ""
    zone: str = ""
    price: float = 0
    currency: str = "MXN"
    valuation: Optional[float] = None
    type: str = ""
    status: str = "Disponible"
    bedrooms: int = 0
    bathrooms: float = 0
    parking: int = 0
    description: str = ""
    amenities: List[str] = Field(default_factory=list)
    videoUrl: Optional[str] = None
    mapsLink: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    isPublished: bool = False
    createdAt: Optional[str] = None


class LeadIn(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    cityInterest: Optional[str] = None
    operationType: Optional[str] = None
    budget: Optional[str] = None
    message: Optional[str] = None


class LeadUpdate(BaseModel):
    status: Optional[LeadStatus] = None
    notes: Optional[str] = None


class CommentIn(BaseModel):
    # Any: wrong types are rejected by the service with its own 400 message
    name: Any = None
    text: Any = None
    rating: Any = None


class CommentPatch(BaseModel):
    approved: Optional[bool] = None


class ProfileIn(BaseModel):
    displayName: str = ""
    heroTitle: str = ""
    heroSub: str = ""
    profilePic: str = ""
    bioShort: str = ""
    bioLong: str = ""
    whatsapp: str = ""
    email: str = ""
    instagram: str = ""
    facebook: str = ""
