"""
Game Catalog API Routes

Reads are public; writes go through the route policy table. Query-string
numbers are parsed permissively: anything that does not parse falls back
to its default (pagination) or imposes no constraint (filters).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.app.repositories.game_repository import IGameRepository
from src.app.services.audit_log_service import AuditLogService
from src.app.services.pagination import (
    PaginationParams,
    parse_bool,
    parse_float,
    parse_int,
)
from src.app.services.query_builder import GameSearchFilters
from src.app.use_cases.games import (
    CountGamesUseCase,
    CreateGameCommand,
    CreateGameUseCase,
    DeleteGameUseCase,
    GameCountResponse,
    GenresResponse,
    GetGameUseCase,
    ListGamesUseCase,
    ListGenresUseCase,
    ListPlatformsUseCase,
    PlatformsResponse,
    SearchGamesUseCase,
    UpdateGameCommand,
    UpdateGameUseCase,
)
from src.domain.entities import AuditAction, Game
from src.depends import (
    client_ip,
    get_audit_log_service,
    get_config,
    get_game_repository,
    get_optional_user,
    require_policy,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["Games"])


def _raise_for_lookup(error):
    if error.code == "INVALID_ID":
        raise ClientError(error)
    if error.code == "GAME_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


def _pagination(
    config, page, limit, sort_by, sort_order, default_sort_by: str
) -> PaginationParams:
    return PaginationParams.from_query(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        default_sort_by=default_sort_by,
        max_limit=config.PAGINATION_MAX_LIMIT,
    )


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[Game]],
    response_model_exclude_none=True,
)
async def list_games(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    config=Depends(get_config),
    games: IGameRepository = Depends(get_game_repository),
):
    """List the catalog one page at a time, newest first by default"""
    params = _pagination(config, page, limit, sort_by, sort_order, "createdAt")
    result = await ListGamesUseCase(games).execute(params)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value.data, pagination=result.value.pagination)


@router.get(
    "/search",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[Game]],
    response_model_exclude_none=True,
)
async def search_games(
    keyword: Optional[str] = Query(None),
    genre: Optional[str] = Query(None),
    platform: Optional[str] = Query(None),
    min_rating: Optional[str] = Query(None, alias="minRating"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    in_stock: Optional[str] = Query(None, alias="inStock"),
    min_year: Optional[str] = Query(None, alias="minYear"),
    max_year: Optional[str] = Query(None, alias="maxYear"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    config=Depends(get_config),
    current_user: Optional[dict] = Depends(get_optional_user),
    games: IGameRepository = Depends(get_game_repository),
):
    """
    Search Games

    Every filter is optional and they combine with AND. Results are sorted
    by rating (highest first) unless sortBy names another field.
    """
    filters = GameSearchFilters(
        keyword=keyword,
        genre=genre,
        platform=platform,
        min_rating=parse_float(min_rating),
        max_price=parse_float(max_price),
        in_stock=parse_bool(in_stock),
        min_year=parse_int(min_year),
        max_year=parse_int(max_year),
    )
    params = _pagination(config, page, limit, sort_by, sort_order, "rating")
    if current_user:
        logger.debug(f"Search by user {current_user['user_id']}")

    result = await SearchGamesUseCase(games).execute(filters, params)

    if result.is_err():
        raise ServerError(result.error)

    found = result.value
    return ApiResponse(
        message=f"{found.pagination.total_items} game(s) found",
        data=found.data,
        pagination=found.pagination,
        filters=found.filters,
    )


@router.get(
    "/stats/count",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[GameCountResponse],
    response_model_exclude_none=True,
)
async def count_games(games: IGameRepository = Depends(get_game_repository)):
    result = await CountGamesUseCase(games).execute()
    if result.is_err():
        raise ServerError(result.error)
    return ApiResponse(data=result.value)


@router.get(
    "/stats/genres",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[GenresResponse],
    response_model_exclude_none=True,
)
async def list_genres(games: IGameRepository = Depends(get_game_repository)):
    result = await ListGenresUseCase(games).execute()
    if result.is_err():
        raise ServerError(result.error)
    return ApiResponse(data=result.value)


@router.get(
    "/stats/platforms",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[PlatformsResponse],
    response_model_exclude_none=True,
)
async def list_platforms(games: IGameRepository = Depends(get_game_repository)):
    result = await ListPlatformsUseCase(games).execute()
    if result.is_err():
        raise ServerError(result.error)
    return ApiResponse(data=result.value)


@router.get(
    "/{game_id}",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[Game],
    response_model_exclude_none=True,
)
async def get_game(game_id: str, games: IGameRepository = Depends(get_game_repository)):
    """
    Get Game by id

    Raises:
        - 400 Bad Request: id is not a valid ObjectId
        - 404 Not Found: No game with this id
    """
    result = await GetGameUseCase(games).execute(game_id)
    if result.is_err():
        _raise_for_lookup(result.error)
    return ApiResponse(data=result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[Game],
    response_model_exclude_none=True,
)
async def create_game(
    command: CreateGameCommand,
    http_request: Request,
    current_user: dict = Depends(require_policy("games:create")),
    games: IGameRepository = Depends(get_game_repository),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """Create Game (admin or moderator)"""
    result = await CreateGameUseCase(games).execute(command)
    if result.is_err():
        raise ServerError(result.error)

    game = result.value
    await audit.log(
        AuditAction.game_created,
        "game",
        user_id=current_user["user_id"],
        resource_id=game.id,
        details={"title": game.title},
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="Game created successfully", data=game)


@router.put(
    "/{game_id}",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[Game],
    response_model_exclude_none=True,
)
async def update_game(
    game_id: str,
    command: UpdateGameCommand,
    http_request: Request,
    current_user: dict = Depends(require_policy("games:update")),
    games: IGameRepository = Depends(get_game_repository),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """
    Update Game (admin or moderator)

    Partial update: at least one field must be present; omitted fields keep
    their stored values.
    """
    result = await UpdateGameUseCase(games).execute(game_id, command)
    if result.is_err():
        _raise_for_lookup(result.error)

    await audit.log(
        AuditAction.game_updated,
        "game",
        user_id=current_user["user_id"],
        resource_id=game_id,
        details={"fields": sorted(command.to_fields())},
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="Game updated successfully", data=result.value)


@router.delete(
    "/{game_id}",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[Game],
    response_model_exclude_none=True,
)
async def delete_game(
    game_id: str,
    http_request: Request,
    current_user: dict = Depends(require_policy("games:delete")),
    games: IGameRepository = Depends(get_game_repository),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """Delete Game (admin only); responds with the deleted record"""
    result = await DeleteGameUseCase(games).execute(game_id)
    if result.is_err():
        _raise_for_lookup(result.error)

    await audit.log(
        AuditAction.game_deleted,
        "game",
        user_id=current_user["user_id"],
        resource_id=game_id,
        details={"title": result.value.title},
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="Game deleted successfully", data=result.value)
