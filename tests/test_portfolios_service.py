import pytest

import portfolio_builder.db as db
from portfolio_builder.models import PortfolioDocument
from portfolio_builder.services.portfolios_service import (
    CorruptPortfolioDataError,
    PortfolioNotFoundError,
    create_portfolio,
    get_portfolio,
    list_user_portfolios,
    load_portfolio_document,
    remove_portfolio,
    replace_portfolio,
)
from portfolio_builder.services.templates_service import TemplateNotFoundError


def _with_template(doc, template_id):
    return doc.model_copy(update={"template_id": template_id})


def test_create_and_get_round_trips_document(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, _with_template(sample_portfolio, 1))

    assert created["portfolio_id"] > 0
    assert created["template_id"] == 1
    assert created["name"] == "Ada's Portfolio"
    assert created["personal_info"]["first_name"] == "Ada"
    assert [s["name"] for s in created["skills"]] == ["Python", "CSS", "SQL", "Mentoring"]

    _row, doc = load_portfolio_document(db_conn, test_user_id, created["portfolio_id"])
    assert doc == _with_template(sample_portfolio, 1)


def test_template_id_string_is_stored_as_int(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, _with_template(sample_portfolio, "2"))
    assert created["template_id"] == 2


def test_create_without_template(db_conn, test_user_id, empty_portfolio):
    created = create_portfolio(db_conn, test_user_id, empty_portfolio)
    assert created["template_id"] is None
    assert created["skills"] == []


def test_create_counts_towards_template_popularity(db_conn, test_user_id, sample_portfolio, empty_portfolio):
    before = db.get_template_by_id(db_conn, 2)["popularity"]

    create_portfolio(db_conn, test_user_id, _with_template(sample_portfolio, 2))
    create_portfolio(db_conn, test_user_id, empty_portfolio)

    assert db.get_template_by_id(db_conn, 2)["popularity"] == before + 1


def test_create_with_unknown_template(db_conn, test_user_id, sample_portfolio):
    with pytest.raises(TemplateNotFoundError):
        create_portfolio(db_conn, test_user_id, _with_template(sample_portfolio, 999))
    assert list_user_portfolios(db_conn, test_user_id) == []


def test_list_only_returns_own_portfolios(db_conn, test_user_id, sample_portfolio, empty_portfolio):
    create_portfolio(db_conn, test_user_id, sample_portfolio)
    other = db.get_or_create_user(db_conn, "other-user")
    create_portfolio(db_conn, other, empty_portfolio)

    mine = list_user_portfolios(db_conn, test_user_id)
    assert [p["name"] for p in mine] == ["Ada's Portfolio"]
    assert set(mine[0]) == {"portfolio_id", "name", "template_id", "is_published", "created_at", "updated_at"}


def test_other_users_portfolio_is_not_found(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, sample_portfolio)
    other = db.get_or_create_user(db_conn, "other-user")

    with pytest.raises(PortfolioNotFoundError):
        get_portfolio(db_conn, other, created["portfolio_id"])
    with pytest.raises(PortfolioNotFoundError):
        remove_portfolio(db_conn, other, created["portfolio_id"])


def test_replace_overwrites_sections(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, sample_portfolio)
    updated_doc = sample_portfolio.model_copy(update={"name": "Renamed", "skills": (), "is_published": True})

    updated = replace_portfolio(db_conn, test_user_id, created["portfolio_id"], updated_doc)

    assert updated["name"] == "Renamed"
    assert updated["skills"] == []
    assert updated["is_published"] is True
    assert updated["projects"] == created["projects"]


def test_replace_missing_portfolio(db_conn, test_user_id, sample_portfolio):
    with pytest.raises(PortfolioNotFoundError):
        replace_portfolio(db_conn, test_user_id, 12345, sample_portfolio)


def test_remove_portfolio(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, sample_portfolio)
    remove_portfolio(db_conn, test_user_id, created["portfolio_id"])

    assert list_user_portfolios(db_conn, test_user_id) == []
    with pytest.raises(PortfolioNotFoundError):
        remove_portfolio(db_conn, test_user_id, created["portfolio_id"])


def test_corrupt_section_json_is_reported(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, sample_portfolio)
    db_conn.execute(
        "UPDATE portfolios SET skills_json = ? WHERE portfolio_id = ?",
        ("{not json", created["portfolio_id"]),
    )
    db_conn.commit()

    with pytest.raises(CorruptPortfolioDataError):
        get_portfolio(db_conn, test_user_id, created["portfolio_id"])


def test_invalid_section_shape_is_reported(db_conn, test_user_id, sample_portfolio):
    created = create_portfolio(db_conn, test_user_id, sample_portfolio)
    db_conn.execute(
        "UPDATE portfolios SET skills_json = ? WHERE portfolio_id = ?",
        ('[{"name": "Python", "proficiency": 11}]', created["portfolio_id"]),
    )
    db_conn.commit()

    with pytest.raises(CorruptPortfolioDataError):
        load_portfolio_document(db_conn, test_user_id, created["portfolio_id"])


def test_null_sections_load_as_empty(db_conn, test_user_id):
    pid = db.insert_portfolio(
        db_conn,
        test_user_id,
        "Bare",
        None,
        {c: "null" for c in db.SECTION_COLUMNS},
    )
    _row, doc = load_portfolio_document(db_conn, test_user_id, pid)
    assert doc == PortfolioDocument(name="Bare")
