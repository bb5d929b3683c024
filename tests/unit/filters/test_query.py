from unittest.mock import MagicMock

from sqlalchemy import Column, MetaData, String, Table, select

from dependent_filters.filters import DependentFilter, apply_filters

accounts = Table(
    "accounts",
    MetaData(),
    Column("country", String),
    Column("plan", String),
)


def test_apply_filters():
    filters = [DependentFilter.make("Country"), DependentFilter.make("Plan")]
    query = apply_filters(None, select(accounts), filters, {"country": "US", "plan": ["free", "pro"]})
    compiled = str(query.compile(compile_kwargs={"literal_binds": True})).replace("\n", "")
    assert compiled.endswith("WHERE accounts.country IN ('US') AND accounts.plan IN ('free', 'pro')")


def test_apply_filters_skips_empty_values():
    country = DependentFilter.make("Country").with_apply(MagicMock())
    plan = DependentFilter.make("Plan").with_apply(MagicMock())
    region = DependentFilter.make("Region").with_apply(MagicMock())
    query = select(accounts)

    assert apply_filters(None, query, [country, plan, region], {"country": "", "plan": None}) is query
    country.apply_callback.assert_not_called()
    plan.apply_callback.assert_not_called()
    region.apply_callback.assert_not_called()


def test_apply_filters_chains_queries():
    request = MagicMock()
    country = DependentFilter.make("Country").with_apply(lambda request, query, value: query + [value])
    plan = DependentFilter.make("Plan").with_apply(lambda request, query, value: query + [value])

    assert apply_filters(request, [], [country, plan], {"plan": "pro", "country": "US"}) == ["US", "pro"]
