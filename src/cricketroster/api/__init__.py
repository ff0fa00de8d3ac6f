"""REST API exposing the roster manager to presentation clients."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from cricketroster.api.schemas import (
    PlayerFieldsRequest,
    PlayerMutationResponse,
    PlayerRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    RoleResponse,
    RosterResponse,
)
from cricketroster.config.roles import DEFAULT_ROLE, iter_roles
from cricketroster.ingest import (
    FieldValidationError,
    PlayerFields,
    fields_to_record,
    parse_player_id,
)
from cricketroster.models import PlayerRecord
from cricketroster.roster import (
    DuplicatePlayerError,
    RosterManager,
    export_roster_to_csv,
    filter_players,
)


logger = logging.getLogger(__name__)


def _insert(roster: RosterManager, record: PlayerRecord) -> PlayerMutationResponse:
    try:
        roster.insert_top(record)
    except DuplicatePlayerError as exc:
        raise HTTPException(status_code=409, detail="ID already exists.") from exc
    return PlayerMutationResponse(
        message=f"Player added. Total: {roster.size()}",
        total=roster.size(),
        player=PlayerResponse.from_record(record),
    )


def create_app(manager: RosterManager | None = None) -> FastAPI:
    app = FastAPI(title="cricketroster")
    roster = manager if manager is not None else RosterManager()
    app.state.roster = roster

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/roles", response_model=list[RoleResponse])
    async def roles() -> list[RoleResponse]:
        return [RoleResponse(role=rules.role, stat_label=rules.stat_label) for rules in iter_roles()]

    @app.get("/players", response_model=RosterResponse)
    async def list_players(q: str | None = Query(None)) -> RosterResponse:
        snapshot = roster.list_top_to_bottom()
        selected = filter_players(snapshot, q)
        return RosterResponse(
            total=len(snapshot),
            matched=len(selected),
            players=[PlayerResponse.from_record(record) for record in selected],
        )

    @app.get("/players/export.csv")
    async def export_players(q: str | None = Query(None)) -> Response:
        selected = filter_players(roster.list_top_to_bottom(), q)
        return Response(
            content=export_roster_to_csv(selected),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=roster.csv"},
        )

    @app.get("/players/{player_id}", response_model=PlayerResponse)
    async def get_player(player_id: int) -> PlayerResponse:
        record = roster.find_by_id(player_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Player not found.")
        return PlayerResponse.from_record(record)

    @app.post("/players", response_model=PlayerMutationResponse, status_code=201)
    async def add_player(payload: PlayerRequest) -> PlayerMutationResponse:
        return _insert(roster, payload.to_record())

    @app.post("/players/form", response_model=PlayerMutationResponse, status_code=201)
    async def add_player_from_fields(payload: PlayerFieldsRequest) -> PlayerMutationResponse:
        fields = PlayerFields(
            raw_id=payload.id,
            raw_name=payload.name,
            raw_role=payload.role,
            raw_matches=payload.matches,
            raw_stat=payload.stat,
        )
        try:
            # Duplicate ids are reported before the remaining fields are parsed.
            if roster.find_by_id(parse_player_id(fields.raw_id)) is not None:
                raise HTTPException(status_code=409, detail="ID already exists.")
            record = fields_to_record(fields)
        except FieldValidationError as exc:
            logger.info("Rejected form input: %s", exc)
            raise HTTPException(status_code=422, detail="Please enter valid numeric values.") from exc
        return _insert(roster, record)

    @app.delete("/players", response_model=PlayerMutationResponse)
    async def reset_players() -> PlayerMutationResponse:
        removed = roster.size()
        roster.clear()
        return PlayerMutationResponse(
            message=f"Cleared {removed} players.",
            total=roster.size(),
        )

    @app.post("/players/pop", response_model=PlayerMutationResponse)
    async def pop_player() -> PlayerMutationResponse:
        removed = roster.remove_top()
        if removed is None:
            raise HTTPException(status_code=404, detail="Stack is empty.")
        return PlayerMutationResponse(
            message=f"Popped: {removed.name}",
            total=roster.size(),
            player=PlayerResponse.from_record(removed),
        )

    @app.put("/players/{player_id}", response_model=PlayerMutationResponse)
    async def update_player(player_id: int, payload: PlayerUpdateRequest) -> PlayerMutationResponse:
        found = roster.update_by_id(
            player_id,
            name=payload.name.strip(),
            role=payload.role.strip() or DEFAULT_ROLE,
            matches_played=payload.matches_played,
            stat_value=payload.stat_value,
        )
        if not found:
            raise HTTPException(status_code=404, detail="Player not found.")
        record = roster.find_by_id(player_id)
        return PlayerMutationResponse(
            message=f"Updated: ID {player_id}",
            total=roster.size(),
            player=PlayerResponse.from_record(record) if record is not None else None,
        )

    @app.delete("/players/{player_id}", response_model=PlayerMutationResponse)
    async def delete_player(player_id: int) -> PlayerMutationResponse:
        if not roster.delete_by_id(player_id):
            raise HTTPException(status_code=404, detail="Not found.")
        return PlayerMutationResponse(
            message=f"Deleted ID: {player_id}",
            total=roster.size(),
        )

    return app


__all__ = ["create_app"]
