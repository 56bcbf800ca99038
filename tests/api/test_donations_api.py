"""Donation ledger endpoints against in-memory repositories."""

from httpx import AsyncClient

DONATION = {
    "requesterName": "Rahim",
    "requesterEmail": "a@x.com",
    "recipientName": "Karim",
    "recipientDistrict": "Dhaka",
    "recipientUpazila": "Mirpur",
    "hospitalName": "DMC",
    "bloodGroup": "O-",
    "donationDate": "2026-11-01",
    "donationTime": "10:00",
    "status": "pending",
}


async def _create(client: AsyncClient, **overrides) -> str:
    response = await client.post("/createDonation", json={**DONATION, **overrides})
    assert response.status_code == 200, response.text
    return response.json()["insertedId"]


async def test_create_then_list_mine(client: AsyncClient) -> None:
    response = await client.post("/createDonation", json=DONATION)
    assert response.status_code == 200
    inserted_id = response.json()["insertedId"]

    mine = await client.get("/myDonations", params={"email": "a@x.com", "page": 0, "limit": 5})
    assert mine.status_code == 200
    body = mine.json()
    assert body["totalCount"] == 1
    assert [d["_id"] for d in body["donations"]] == [inserted_id]
    donation = body["donations"][0]
    assert donation["requesterEmail"] == "a@x.com"
    assert donation["hospitalName"] == "DMC"
    assert donation["createdAt"]


async def test_create_requires_requester_email(client: AsyncClient) -> None:
    payload = {k: v for k, v in DONATION.items() if k != "requesterEmail"}
    response = await client.post("/createDonation", json=payload)
    assert response.status_code == 400


async def test_create_defaults_status_to_pending(client: AsyncClient) -> None:
    payload = {k: v for k, v in DONATION.items() if k != "status"}
    donation_id = await client.post("/createDonation", json=payload)
    fetched = await client.get(f"/donation-requests/{donation_id.json()['insertedId']}")
    assert fetched.json()["status"] == "pending"


async def test_my_donations_requires_email(client: AsyncClient) -> None:
    response = await client.get("/myDonations")
    assert response.status_code == 400


async def test_my_donations_filters_by_requester_and_status(client: AsyncClient) -> None:
    await _create(client)
    await _create(client, status="done")
    await _create(client, requesterEmail="b@x.com")

    mine = await client.get("/myDonations", params={"email": "a@x.com"})
    assert mine.json()["totalCount"] == 2
    done = await client.get("/myDonations", params={"email": "a@x.com", "status": "done"})
    assert done.json()["totalCount"] == 1
    everything = await client.get("/myDonations", params={"email": "a@x.com", "status": "all"})
    assert everything.json()["totalCount"] == 2


async def test_pagination_reproduces_set_newest_first(client: AsyncClient) -> None:
    ids = [await _create(client) for _ in range(7)]
    seen: list[str] = []
    for page in range(4):
        body = (await client.get("/all-donations", params={"page": page, "limit": 3})).json()
        assert len(body["donations"]) <= 3
        assert body["totalCount"] == 7
        seen.extend(d["_id"] for d in body["donations"])
    assert seen == list(reversed(ids))


async def test_all_donations_ignores_status(client: AsyncClient) -> None:
    await _create(client)
    await _create(client, status="canceled")
    body = (await client.get("/allDonations", params={"status": "canceled"})).json()
    assert body["totalCount"] == 2
    filtered = (await client.get("/all-donations", params={"status": "canceled"})).json()
    assert filtered["totalCount"] == 1


async def test_donation_requests_list_and_get(client: AsyncClient) -> None:
    first = await _create(client)
    await _create(client, status="done")
    listed = (await client.get("/donation-requests", params={"status": "pending"})).json()
    assert [d["_id"] for d in listed] == [first]
    fetched = await client.get(f"/donation-requests/{first}")
    assert fetched.status_code == 200
    assert fetched.json()["recipientName"] == "Karim"


async def test_get_malformed_id_is_bad_request(client: AsyncClient) -> None:
    response = await client.get("/donation-requests/not%20valid")
    assert response.status_code == 400


async def test_get_missing_is_not_found(client: AsyncClient) -> None:
    response = await client.get("/myDonations/doesnotexist")
    assert response.status_code == 404


async def test_update_strips_id_and_merges(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(
        f"/myDonations/{donation_id}",
        json={"_id": "hijack", "hospitalName": "Square", "bloodGroup": "AB+"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["_id"] == donation_id
    assert body["hospitalName"] == "Square"
    assert body["bloodGroup"] == "AB+"
    assert body["recipientName"] == "Karim"


async def test_update_with_only_id_is_bad_request(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(f"/myDonations/{donation_id}", json={"_id": donation_id})
    assert response.status_code == 400


async def test_update_unknown_field_is_bad_request(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(f"/myDonations/{donation_id}", json={"colour": "red"})
    assert response.status_code == 400


async def test_update_missing_is_not_found(client: AsyncClient) -> None:
    response = await client.patch("/myDonations/missing", json={"hospitalName": "X"})
    assert response.status_code == 404


async def test_status_update_is_idempotent(client: AsyncClient) -> None:
    donation_id = await _create(client)
    first = await client.patch(f"/donations/{donation_id}", json={"status": "done"})
    second = await client.patch(f"/donations/{donation_id}", json={"status": "done"})
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert second.json()["status"] == "done"


async def test_status_update_rejects_unknown_status(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(f"/donations/{donation_id}", json={"status": "lost"})
    assert response.status_code == 400


async def test_delete_then_delete_again(client: AsyncClient) -> None:
    donation_id = await _create(client)
    first = await client.delete(f"/myDonations/{donation_id}")
    assert first.status_code == 200
    assert first.json() == {"deletedCount": 1}
    second = await client.delete(f"/myDonations/{donation_id}")
    assert second.status_code == 404


async def test_assign_active_donor(client: AsyncClient, register_user, stores) -> None:
    donor_id = await register_user("d@x.com", role="donor", status="active", name="Donor")
    donation_id = await _create(client)

    response = await client.patch(
        f"/donation/assign-donor/{donation_id}", json={"donorEmail": "d@x.com"}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Donor assigned successfully."

    donation = (await client.get(f"/donation-requests/{donation_id}")).json()
    assert donation["status"] == "inprogress"
    assert donation["donorEmail"] == "d@x.com"
    assert donation["assignedDonor"]["email"] == "d@x.com"
    assert donation["assignedDonor"]["_id"] == donor_id

    records = [r for r in stores.donations.assignments if r.donation_id == donation_id]
    assert len(records) == 1
    assert records[0].donor_email == "d@x.com"


async def test_assign_inactive_donor_leaves_donation_unchanged(
    client: AsyncClient, register_user, stores
) -> None:
    await register_user("p@x.com", role="donor")
    donation_id = await _create(client)
    before = (await client.get(f"/donation-requests/{donation_id}")).json()

    response = await client.patch(
        f"/donation/assign-donor/{donation_id}", json={"donorEmail": "p@x.com"}
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Donor not found or inactive"

    after = (await client.get(f"/donation-requests/{donation_id}")).json()
    assert after == before
    assert stores.donations.assignments == []


async def test_assign_unknown_donor_is_not_found(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(
        f"/donation/assign-donor/{donation_id}", json={"donorEmail": "ghost@x.com"}
    )
    assert response.status_code == 404


async def test_assign_to_missing_donation_is_not_found(
    client: AsyncClient, register_user, stores
) -> None:
    await register_user("d@x.com", role="donor", status="active")
    response = await client.patch(
        "/donation/assign-donor/missing", json={"donorEmail": "d@x.com"}
    )
    assert response.status_code == 404
    assert stores.donations.assignments == []


async def test_update_rejects_null_requester_email(client: AsyncClient) -> None:
    donation_id = await _create(client)
    for field in ("requesterEmail", "status"):
        response = await client.patch(f"/myDonations/{donation_id}", json={field: None})
        assert response.status_code == 400, field

    mine = await client.get("/myDonations", params={"email": "a@x.com"})
    assert mine.status_code == 200
    assert mine.json()["totalCount"] == 1


async def test_update_allows_clearing_optional_field(client: AsyncClient) -> None:
    donation_id = await _create(client)
    response = await client.patch(f"/myDonations/{donation_id}", json={"hospitalName": None})
    assert response.status_code == 200
    assert response.json()["hospitalName"] is None
