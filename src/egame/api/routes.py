"""HTTP routes for the egame API."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from egame.api.runtime import ApiState, WorldService
from egame.domain.enums import ViolationKind
from egame.domain.errors import RuleViolation
from egame.domain.models import World
from egame.repository import WorldNotFoundError

router = APIRouter()

MAX_PRICE_LEVEL = 1000

VIOLATION_STATUS: dict[ViolationKind, int] = {
    ViolationKind.MISSING_SENDER: status.HTTP_400_BAD_REQUEST,
    ViolationKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ViolationKind.INVALID_TARGET: status.HTTP_400_BAD_REQUEST,
    ViolationKind.UNKNOWN_PLAYER: status.HTTP_404_NOT_FOUND,
    ViolationKind.FLEET_NOT_HOME: status.HTTP_409_CONFLICT,
    ViolationKind.FLEET_BUSY: status.HTTP_409_CONFLICT,
    ViolationKind.FLEET_NOT_PRESENT: status.HTTP_409_CONFLICT,
}


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class AccountView(BaseModel):
    balance: int
    last_accrual_block: int
    building_level: int


class FleetView(BaseModel):
    position: str
    size: int
    orbiting_time: int
    landing_time: int


class WorldDetail(BaseModel):
    accounts: dict[str, AccountView]
    fleets: dict[str, FleetView]


class SenderRequest(BaseModel):
    sender: str | None = None


class SummonFleetRequest(SenderRequest):
    size: int


class SendFleetRequest(SenderRequest):
    target: str = Field(min_length=1)


class BattleRequest(SenderRequest):
    attacker: str = Field(min_length=1)
    defender: str = Field(min_length=1)


class BuildingPriceResponse(BaseModel):
    level: int
    price: int


async def _apply(pending: Awaitable[World]) -> WorldDetail:
    """Await a world operation and translate engine errors to HTTP errors."""

    try:
        world = await pending
    except RuleViolation as exc:
        raise HTTPException(status_code=VIOLATION_STATUS[exc.kind], detail=exc.to_dict()) from exc
    except WorldNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="world not initialised"
        ) from exc
    return WorldDetail.model_validate(WorldService.to_world_dict(world))


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "storage_backend": state.settings.storage_backend,
        "block": state.clock(),
    }


@router.get("/rules")
async def rules_overview(state: ApiStateDep) -> dict[str, object]:
    """Expose the rule constants clients need to plan ahead."""

    economy = state.rules.economy
    fleet = state.rules.fleet
    return {
        "block_seconds": state.settings.block_seconds,
        "economy": {
            "starting_building_level": economy.starting_building_level,
            "price_ratio": [economy.price_numerator, economy.price_denominator],
            "ship_price": economy.ship_price,
        },
        "fleet": {
            "orbit_delay_blocks": fleet.orbit_delay_blocks,
            "landing_delay_blocks": fleet.landing_delay_blocks,
        },
    }


@router.get("/state", response_model=WorldDetail)
async def game_state(state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.snapshot())


@router.get("/building-price", response_model=BuildingPriceResponse)
async def building_price(
    state: ApiStateDep,
    level: Annotated[int, Query(ge=0, le=MAX_PRICE_LEVEL)],
) -> BuildingPriceResponse:
    return BuildingPriceResponse(level=level, price=state.worlds.building_price(level))


@router.post("/start", response_model=WorldDetail)
async def start(request: SenderRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.start(request.sender))


@router.post("/build", response_model=WorldDetail)
async def build(request: SenderRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.build(request.sender))


@router.post("/update-balance", response_model=WorldDetail)
async def update_balance(request: SenderRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.update_balance(request.sender))


@router.post("/summon-fleet", response_model=WorldDetail)
async def summon_fleet(request: SummonFleetRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.summon_fleet(request.sender, request.size))


@router.post("/send-fleet", response_model=WorldDetail)
async def send_fleet(request: SendFleetRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(state.worlds.send_fleet(request.sender, request.target))


@router.post("/battle", response_model=WorldDetail)
async def battle(request: BattleRequest, state: ApiStateDep) -> WorldDetail:
    return await _apply(
        state.worlds.battle(request.sender, request.attacker, request.defender)
    )
