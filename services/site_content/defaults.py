# services/site_content/defaults.py

# Served by the home page when no contact record has been stored yet.
DEFAULT_CONTACT_INFO = {
    "school_name": "Edmonton Excellence Academy",
    "address": "123 Education Street, Edmonton, AB T5K 2P4",
    "phone": "(780) 123-4567",
    "email": "info@edmontonexcellence.ca",
    "website": "https://www.edmontonexcellence.ca",
    "office_hours": "Monday - Friday: 8:00 AM - 4:00 PM",
}

# id of the placeholder record; never assigned to a stored row
DEFAULT_CONTACT_INFO_ID = 0
