"""Page Object for the login page."""

import logging

from selenium.webdriver.common.by import By

from ..base_page import BasePage
from ..exceptions import UnexpectedStateError, WebDriverError
from ..waits import DRIVER_FAULTS

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """Page object for the login form and the secure area behind it."""

    # Locators
    USERNAME_INPUT = (By.ID, "username")
    PASSWORD_INPUT = (By.ID, "password")
    LOGIN_BUTTON = (By.CSS_SELECTOR, "button[type='submit']")
    SUCCESS_FLASH = (By.CSS_SELECTOR, ".flash.success")
    ERROR_FLASH = (By.CSS_SELECTOR, ".flash.error")
    PAGE_HEADING = (By.CSS_SELECTOR, "h2")
    LOGOUT_BUTTON = (By.CSS_SELECTOR, ".button.secondary")
    SECURE_AREA_TEXT = "Secure Area"

    def navigate(self) -> None:
        """Open the login page and wait until the username field is present."""
        self.navigate_to(self.config.login_url)
        self.wait.find(self.USERNAME_INPUT)
        self.navigated = True
        logger.info(f"Login page ready: {self.config.login_url}")

    def enter_username(self, username: str) -> None:
        logger.info(f"Entering username '{username}'")
        self.interact(self.USERNAME_INPUT, lambda el: el.send_keys(username))

    def enter_password(self, password: str) -> None:
        logger.info("Entering password")
        self.interact(self.PASSWORD_INPUT, lambda el: el.send_keys(password))

    def click_login_button(self) -> None:
        """Click submit. Does not wait for the outcome of the login attempt."""
        logger.info("Clicking login button")
        self.interact(self.LOGIN_BUTTON, lambda el: el.click())

    def is_logged_in(self) -> bool:
        """Return True if the success banner shows up within the wait timeout."""
        return self.element_exists(self.SUCCESS_FLASH)

    def get_error_message(self) -> str:
        """
        Return the text of the error banner.

        Raises:
            ElementNotFoundError: If no error banner appears
        """
        message = self.interact(self.ERROR_FLASH, lambda el: el.text)
        logger.info(f"Error banner: {message.strip()}")
        return message

    def is_in_secure_area(self) -> bool:
        heading = self.interact(self.PAGE_HEADING, lambda el: el.text)
        return self.SECURE_AREA_TEXT in heading

    def clear_username(self) -> None:
        self.interact(self.USERNAME_INPUT, lambda el: el.clear())

    def clear_password(self) -> None:
        self.interact(self.PASSWORD_INPUT, lambda el: el.clear())

    def logout(self) -> None:
        """
        Log out if currently logged in, otherwise do nothing.

        When logged in, clicks the logout control and waits for the username
        field to come back, which confirms we are on the login form again.
        """
        if not self.is_logged_in():
            logger.debug("Not logged in, nothing to log out of")
            return
        logger.info("Logging out")
        self.interact(self.LOGOUT_BUTTON, lambda el: el.click())
        self.find_element(self.USERNAME_INPUT)

    def quit(self) -> None:
        """
        End the browser session. The page object is unusable afterwards.

        Raises:
            UnexpectedStateError: If the session was already ended
            WebDriverError: If the driver failed to close the session
        """
        if self.closed:
            raise UnexpectedStateError("LoginPage.quit() called twice")
        self.closed = True
        logger.info("Closing browser session")
        try:
            self.driver.quit()
        except DRIVER_FAULTS as e:
            raise WebDriverError(f"Failed to quit browser session: {e}") from e
