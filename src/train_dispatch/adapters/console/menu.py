"""Interactive text menu driving the departure register."""

import logging
from collections.abc import Callable

from train_dispatch.adapters.console.display import ConsoleDisplay
from train_dispatch.adapters.console.feedback import UserFeedback
from train_dispatch.adapters.console.input_handler import InputHandler
from train_dispatch.application.services import DepartureRegister
from train_dispatch.domain.models import Departure, SearchAttribute
from train_dispatch.domain.ports.display_adapter import DisplayAdapter
from train_dispatch.domain.time_utils import format_hhmm

logger = logging.getLogger(__name__)

EXIT_APPLICATION = 0
VIEW_DEPARTURES = 1
ADD_DEPARTURE = 2
SET_DELAY = 3
ASSIGN_TRACK = 4
SEARCH_BY_TRAIN_NUMBER = 5
SEARCH_BY_DESTINATION = 6
SEARCH_BY_DEPARTURE_TIME = 7
SORT_BY_DEPARTURE_TIME = 8
REMOVE_EXPIRED = 9
UPDATE_STATION_TIME = 10
REMOVE_DEPARTURE = 11
REMOVE_ALL_DEPARTURES = 12
SHOW_GUIDE = 13


class MenuController(DisplayAdapter):
    """Reads menu choices and runs exactly one register operation per choice."""

    def __init__(
        self,
        register: DepartureRegister,
        display: ConsoleDisplay,
        input_handler: InputHandler,
        feedback: UserFeedback,
    ) -> None:
        self._register = register
        self._display = display
        self._input = input_handler
        self._feedback = feedback
        self._running = False
        self._actions: dict[int, Callable[[], None]] = {
            VIEW_DEPARTURES: self.view_departures,
            ADD_DEPARTURE: self.add_departure,
            SET_DELAY: self.set_delay,
            ASSIGN_TRACK: self.assign_track,
            SEARCH_BY_TRAIN_NUMBER: self.search_by_train_number,
            SEARCH_BY_DESTINATION: self.search_by_destination,
            SEARCH_BY_DEPARTURE_TIME: self.search_by_departure_time,
            SORT_BY_DEPARTURE_TIME: self.sort_by_departure_time,
            REMOVE_EXPIRED: self.remove_expired,
            UPDATE_STATION_TIME: self.update_station_time,
            REMOVE_DEPARTURE: self.remove_departure,
            REMOVE_ALL_DEPARTURES: self.remove_all_departures,
            SHOW_GUIDE: self._display.display_guide,
        }

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        self._running = True
        self._display.display_station_header()
        self._display.display_welcome()
        try:
            while self._running:
                self._display.display_menu()
                choice = self._input.read_int("menu_choice")
                self.handle_choice(choice)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, shutting down")
            self._feedback.success("goodbye")
        finally:
            self._running = False

    def stop(self) -> None:
        self._running = False

    def handle_choice(self, choice: int) -> None:
        """Run the action for a menu choice, reporting any validation error."""
        if choice == EXIT_APPLICATION:
            self._feedback.success("goodbye")
            self.stop()
            return

        action = self._actions.get(choice)
        if action is None:
            self._feedback.error("invalid_choice")
            return

        try:
            action()
        except ValueError as e:
            # Validation and format errors leave the register unchanged
            logger.debug(f"Menu option {choice} failed: {e}")
            self._feedback.error_from(e)

    def view_departures(self) -> None:
        self._display.display_departure_table(self._register.iterate_all())

    def add_departure(self) -> None:
        train_number = self._input.read_string("train_number")
        destination = self._input.read_string("destination")
        departure_time = self._input.read_time("departure_time")
        line = self._input.read_string("line")
        track = self._input.read_int("track")

        try:
            departure = Departure(
                departure_station=self._register.station_name,
                destination=destination,
                departure_time=departure_time,
                line=line,
                track=track,
                train_number=train_number,
            )
        except ValueError as e:
            self._feedback.error_from(e)
            self._feedback.error("train_not_added")
            return

        if self._register.add_departure(departure):
            self._feedback.success("added")
        else:
            self._feedback.error("train_not_added")

    def _find_departure(self) -> Departure | None:
        train_number = self._input.read_string("train_number")
        departure = self._register.get_by_train_number(train_number)
        if departure is None:
            self._feedback.error("not_found")
        return departure

    def set_delay(self) -> None:
        departure = self._find_departure()
        if departure is None:
            return
        delay = self._input.read_int("delay")
        try:
            departure.set_delay(delay)
        except ValueError as e:
            self._feedback.error_from(e)
            self._feedback.error("failed_to_set_delay")
            return
        self._feedback.success("delay_set")

    def assign_track(self) -> None:
        departure = self._find_departure()
        if departure is None:
            return
        track = self._input.read_int("track")
        try:
            departure.set_track(track)
        except ValueError as e:
            self._feedback.error_from(e)
            self._feedback.error("failed_to_assign_track")
            return
        self._feedback.success("track_assigned")

    def search_by_train_number(self) -> None:
        train_number = self._input.read_string("train_number")
        self._display.display_search_results(
            self._register.find_by_attribute(SearchAttribute.TRAIN_NUMBER, train_number)
        )

    def search_by_destination(self) -> None:
        destination = self._input.read_string("destination")
        self._display.display_search_results(
            self._register.find_by_attribute(SearchAttribute.DESTINATION, destination)
        )

    def search_by_departure_time(self) -> None:
        departure_time = self._input.read_time("departure_time")
        self._display.display_search_results(
            self._register.find_by_attribute(
                SearchAttribute.DEPARTURE_TIME, format_hhmm(departure_time)
            )
        )

    def sort_by_departure_time(self) -> None:
        self._register.sort_by_departure_time()
        self._feedback.success("sorted")

    def remove_expired(self) -> None:
        removed = self._register.remove_expired()
        self._display.display_removed_departures(removed)
        self._feedback.success("expired_removed")

    def update_station_time(self) -> None:
        new_time = self._input.read_time("station_time")
        self._register.update_station_time(new_time)
        self._feedback.success("station_time_updated")
        self._display.display_station_header()

    def remove_departure(self) -> None:
        train_number = self._input.read_string("train_number")
        if self._register.remove_by_train_number(train_number):
            self._feedback.success("removed")
        else:
            self._feedback.error("not_found")

    def remove_all_departures(self) -> None:
        self._register.remove_all()
        self._feedback.success("all_removed")
