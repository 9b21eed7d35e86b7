"""Unit tests for the Test Prep -> SAT -> problem navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest

from atlas_e2e.flows.practice import (
    find_submit,
    navigate_to_sat_problem,
    open_test_prep,
    select_first_answer,
)
from atlas_e2e.models import AtlasSettings

if TYPE_CHECKING:
    from tests.conftest import LocatorFactory, PageFactory

TEST_PREP_LINK = 'a:text-matches("Test Prep")'
SAT_BUTTON = 'button:text-matches("SAT")'
START_BUTTON = 'button:text-matches("Start")'
RADIO = 'button[role="radio"]'
SUBMIT = 'button:text-matches("Submit")'


class TestOpenTestPrep:
    """Tests for open_test_prep."""

    @pytest.mark.asyncio
    async def test_uses_menu_link(
        self, make_page: PageFactory, make_locator: LocatorFactory, settings: AtlasSettings
    ) -> None:
        link = make_locator(text="Test Prep")
        page = make_page(locators={TEST_PREP_LINK: link})

        probe, used_direct_url = await open_test_prep(page, settings)

        assert probe.text == "Test Prep"
        assert not used_direct_url
        link.click.assert_awaited_once()
        page.goto.assert_not_called()

    @pytest.mark.asyncio
    async def test_falls_back_to_direct_url(self, make_page: PageFactory, settings: AtlasSettings) -> None:
        page = make_page()

        probe, used_direct_url = await open_test_prep(page, settings)

        assert not probe.found
        assert used_direct_url
        page.goto.assert_awaited_once_with("https://atlas.test/test-prep")


class TestSelectFirstAnswer:
    """Tests for select_first_answer."""

    @pytest.mark.asyncio
    async def test_clicks_first_option(self, make_page: PageFactory, make_locator: LocatorFactory) -> None:
        options = make_locator(count=4)
        page = make_page(locators={RADIO: options})

        probe, selected = await select_first_answer(page)

        assert probe.count == 4
        assert selected
        options.click.assert_awaited_once()
        page.wait_for_timeout.assert_awaited_once_with(1000)

    @pytest.mark.asyncio
    async def test_disabled_option_is_not_clicked(self, make_page: PageFactory, make_locator: LocatorFactory) -> None:
        options = make_locator(count=4, enabled=False)
        page = make_page(locators={RADIO: options})

        probe, selected = await select_first_answer(page)

        assert probe.found
        assert not selected
        options.click.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_options(self, make_page: PageFactory) -> None:
        probe, selected = await select_first_answer(make_page())

        assert not probe.found
        assert not selected


@pytest.mark.asyncio
async def test_submit_is_located_but_not_pressed(make_page: PageFactory, make_locator: LocatorFactory) -> None:
    submit = make_locator(text="Submit")
    page = make_page(locators={SUBMIT: submit})

    probe = await find_submit(page)

    assert probe.found
    submit.click.assert_not_called()


class TestNavigateToSatProblem:
    """Tests for the full navigation."""

    @pytest.mark.asyncio
    async def test_full_path(
        self, make_page: PageFactory, make_locator: LocatorFactory, settings: AtlasSettings
    ) -> None:
        """Every stage found: the result records each selector used."""
        start = make_locator(text="Start")
        page = make_page(
            locators={
                TEST_PREP_LINK: make_locator(text="Test Prep"),
                SAT_BUTTON: make_locator(text="SAT"),
                START_BUTTON: start,
                RADIO: make_locator(count=4),
                SUBMIT: make_locator(text="Submit"),
            }
        )

        async def open_problem(*args, **kwargs):  # noqa: ANN002, ANN003, ANN202
            page.url = "https://atlas.test/sat/practice/17"

        start.click = AsyncMock(side_effect=open_problem)

        result = await navigate_to_sat_problem(page, settings)

        assert result.test_prep.selector == "a*=Test Prep"
        assert not result.used_direct_url
        assert result.sat.selector == "button*=SAT"
        assert result.problem.selector == "button*=Start"
        assert result.url == "https://atlas.test/sat/practice/17"
        assert result.in_problem_area
        assert result.answer_selected
        assert result.submit.found

    @pytest.mark.asyncio
    async def test_nothing_found_never_raises(self, make_page: PageFactory, settings: AtlasSettings) -> None:
        """An unrecognized UI produces an all-negative result, not an error."""
        page = make_page(url="https://atlas.test/dashboard")

        result = await navigate_to_sat_problem(page, settings)

        assert result.used_direct_url
        assert not result.sat.found
        assert not result.problem.found
        assert not result.in_problem_area
        assert not result.answers.found
        assert not result.submit.found
