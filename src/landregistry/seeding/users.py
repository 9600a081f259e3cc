"""Account seeding: administrator, officer, residents and pending sign-ups."""

from __future__ import annotations

import logging
from typing import Any

from landregistry.core.types import UserRole, UserStatus
from landregistry.registry.models import UserAccount, UserProfile
from landregistry.repositories import resolve
from landregistry.seeding.decisions import Decisions

logger = logging.getLogger(__name__)

ADMIN_ADDRESS = "0x1234567890123456789012345678901234567890"

RESIDENTS: list[dict[str, str]] = [
    {
        "email": "marie.mukamana@email.com",
        "wallet_address": "0x3456789012345678901234567890123456789012",
        "first_name": "Marie",
        "last_name": "Mukamana",
        "phone_number": "+250 788 123 456",
        "district": "Kicukiro",
        "sector": "Niboye",
        "cell": "Kabuga",
        "village": "Kabuga",
    },
    {
        "email": "paul.kagame@email.com",
        "wallet_address": "0x4567890123456789012345678901234567890123",
        "first_name": "Paul",
        "last_name": "Kagame",
        "phone_number": "+250 788 234 567",
        "district": "Gasabo",
        "sector": "Kacyiru",
        "cell": "Kamatamu",
        "village": "Kamatamu",
    },
    {
        "email": "grace.uwimana@email.com",
        "wallet_address": "0x5678901234567890123456789012345678901234",
        "first_name": "Grace",
        "last_name": "Uwimana",
        "phone_number": "+250 788 345 678",
        "district": "Nyarugenge",
        "sector": "Gitega",
        "cell": "Gitega",
        "village": "Gitega",
    },
    {
        "email": "jean.baptiste@email.com",
        "wallet_address": "0x6789012345678901234567890123456789012345",
        "first_name": "Jean Baptiste",
        "last_name": "Nzeyimana",
        "phone_number": "+250 788 456 789",
        "district": "Rwamagana",
        "sector": "Kigabiro",
        "cell": "Kigabiro",
        "village": "Kigabiro",
    },
    {
        "email": "alice.mutesi@email.com",
        "wallet_address": "0x7890123456789012345678901234567890123456",
        "first_name": "Alice",
        "last_name": "Mutesi",
        "phone_number": "+250 788 567 890",
        "district": "Huye",
        "sector": "Tumba",
        "cell": "Tumba",
        "village": "Tumba",
    },
]

PENDING_USERS: list[dict[str, str]] = [
    {
        "email": "pending1@email.com",
        "wallet_address": "0x8901234567890123456789012345678901234567",
        "first_name": "Pending",
        "last_name": "User1",
    },
    {
        "email": "pending2@email.com",
        "wallet_address": "0x9012345678901234567890123456789012345678",
        "first_name": "Pending",
        "last_name": "User2",
    },
]

_DEFAULT_PREFERENCES: dict[str, Any] = {
    "language": "en",
    "notifications": {"email": True, "push": True, "sms": False},
    "privacy": {"show_profile": True, "show_land_parcels": True, "show_transactions": False},
}


def build_accounts(decisions: Decisions) -> list[UserAccount]:
    """Build the fixed seed accounts. Residents are verified with p=0.7."""
    accounts = [
        UserAccount(
            email="admin@rwalandchain.com",
            wallet_address=ADMIN_ADDRESS,
            role=UserRole.ADMIN,
            email_verified=True,
            profiles=[
                UserProfile(
                    first_name="System",
                    last_name="Administrator",
                    phone_number="+250 788 000 001",
                    address="Kigali, Rwanda",
                    district="Gasabo",
                    sector="Kimisagara",
                    cell="Nyabugogo",
                    village="Nyabugogo",
                    country="Rwanda",
                    is_verified=True,
                )
            ],
        ),
        UserAccount(
            email="officer@rlmua.gov.rw",
            wallet_address="0x2345678901234567890123456789012345678901",
            role=UserRole.RLMUA_OFFICER,
            email_verified=True,
            profiles=[
                UserProfile(
                    first_name="Jean",
                    last_name="Uwimana",
                    phone_number="+250 788 000 002",
                    occupation="Land Administration Officer",
                    address="Kigali, Rwanda",
                    district="Nyarugenge",
                    sector="Nyarugenge",
                    cell="Rwampara",
                    village="Rwampara",
                    country="Rwanda",
                    is_public=True,
                    is_verified=True,
                )
            ],
        ),
    ]

    for data in RESIDENTS:
        accounts.append(
            UserAccount(
                email=data["email"],
                wallet_address=data["wallet_address"],
                email_verified=True,
                profiles=[
                    UserProfile(
                        first_name=data["first_name"],
                        last_name=data["last_name"],
                        phone_number=data["phone_number"],
                        address=f"{data['cell']}, {data['sector']}, {data['district']}",
                        district=data["district"],
                        sector=data["sector"],
                        cell=data["cell"],
                        village=data["village"],
                        country="Rwanda",
                        is_public=True,
                        is_verified=decisions.chance(0.7, "profile_verified"),
                        preferences=_DEFAULT_PREFERENCES,
                    )
                ],
            )
        )

    for data in PENDING_USERS:
        accounts.append(
            UserAccount(
                email=data["email"],
                wallet_address=data["wallet_address"],
                status=UserStatus.PENDING_VERIFICATION,
                profiles=[
                    UserProfile(
                        first_name=data["first_name"],
                        last_name=data["last_name"],
                        country="Rwanda",
                    )
                ],
            )
        )
    return accounts


class UserSeeder:
    """Creates the seed accounts when the account store is empty."""

    def __init__(self, users: Any, decisions: Decisions) -> None:
        self._users = users
        self._decisions = decisions

    async def run(self) -> int:
        """Return the number of accounts created (0 when skipped)."""
        if await resolve(self._users.count()) > 0:
            logger.info("Accounts already exist, skipping account seeding")
            return 0

        logger.info("Seeding accounts...")
        accounts = build_accounts(self._decisions)
        for account in accounts:
            await resolve(self._users.save(account))
        logger.info("Created %d accounts with profiles", len(accounts))
        return len(accounts)
