import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate
from typing import List

from fillstation.config import MAIL_SERVER, MAIL_PORT, MAIL_USER, MAIL_PASSWORD, MAIL_FROM
from fillstation.utils.exceptions import ApiError
from fillstation.utils.loggers import logger


def send_mail(recipients: List[str], subject: str, text: str) -> None:
    msg = MIMEMultipart()
    msg['From'] = MAIL_FROM
    msg['To'] = ", ".join(recipients)
    msg['Date'] = formatdate(localtime=True)
    msg['Subject'] = subject
    msg.attach(MIMEText(text, 'html'))

    try:
        smtp = smtplib.SMTP(MAIL_SERVER, MAIL_PORT)
        # smtp.set_debuglevel(1)
        smtp.starttls()
        if MAIL_USER:
            smtp.login(MAIL_USER, MAIL_PASSWORD)
        smtp.sendmail(MAIL_FROM, recipients, msg.as_string())
        smtp.quit()

    except (smtplib.SMTPException, OSError):
        raise ApiError(f"Failed to send mail '{subject}' to {', '.join(recipients)}")

    logger.info(f"Mail '{subject}' sent to {', '.join(recipients)}")
