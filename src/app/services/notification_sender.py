from abc import ABC, abstractmethod


class INotificationSender(ABC):
    """Delivers account notifications to users - application layer"""

    @abstractmethod
    async def send_password_reset(
        self, email: str, reset_link: str, first_name: str
    ) -> bool:
        """
        Deliver a password reset link.

        Returns:
            True if the message was accepted for delivery, False otherwise

        Raises:
            NotificationError: the delivery service could not be reached
        """
        pass
