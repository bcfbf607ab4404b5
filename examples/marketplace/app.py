"""Marketplace — listings and trade history on top of the service app.

Shows how marketplace routes plug into ``create_app()``: collection reads
and appends through ``app.store``, ids from ``generate_id``, prices
coerced with ``ensure_number``, and ``HTTPError`` for client mistakes.

Run:
    python -m havenox run examples.marketplace.app:app
"""

from havenox import HTTPError, RequestContext, create_app
from havenox.data import ensure_number, generate_id
from havenox.service import utc_timestamp

app = create_app()


def _payload(ctx: RequestContext) -> dict:
    if not isinstance(ctx.body, dict):
        raise HTTPError(400, "Expected a JSON object")
    return ctx.body


@app.route("/listings")
async def list_listings(ctx: RequestContext):
    """All listings, optionally filtered by ``?seller=``."""
    listings = await app.store.read_collection("listings")
    seller = ctx.query.get("seller")
    if seller:
        listings = [item for item in listings if item.get("seller") == seller]
    return listings


@app.route("/listings", methods=["POST"])
async def create_listing(ctx: RequestContext):
    body = _payload(ctx)
    if not body.get("title"):
        raise HTTPError(400, "title is required")
    listing = {
        "id": generate_id("listing"),
        "title": body["title"],
        "seller": body.get("seller"),
        "price": ensure_number(body.get("price")),
        "createdAt": utc_timestamp(),
    }
    await app.store.append_record("listings", listing)
    return listing, 201


# Literal route before the parameter route: first match wins
@app.route("/listings/recent")
async def recent_listings(ctx: RequestContext):
    listings = await app.store.read_collection("listings")
    limit = int(ensure_number(ctx.query.get("limit"), fallback=5))
    return listings[-limit:] if limit > 0 else []


@app.route("/listings/:id")
async def get_listing(ctx: RequestContext):
    for listing in await app.store.read_collection("listings"):
        if listing.get("id") == ctx.params["id"]:
            return listing
    raise HTTPError(404, "Listing not found")


@app.route("/trades", methods=["POST"])
async def record_trade(ctx: RequestContext):
    body = _payload(ctx)
    trade = {
        "id": generate_id("trade"),
        "listingId": body.get("listingId"),
        "amount": ensure_number(body.get("amount")),
        "timestamp": utc_timestamp(),
    }
    await app.store.append_record("tradeHistory", trade)
    return trade, 201


@app.route("/trades")
async def list_trades(ctx: RequestContext):
    return await app.store.read_collection("tradeHistory")
