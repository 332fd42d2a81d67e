contact_tag_description = "Contact form and service endpoints."

contact_description = "Forwards the message of the contact form to the station support mailbox."

health_description = "Service availability check."
