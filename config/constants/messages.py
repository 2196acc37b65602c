"""
==========================================================
USER-FACING MESSAGES
==========================================================
Headings, labels and validation messages shown on the pages.
Change the wording once → updates across the entire app.
"""

# --- List Page ---
MSG_LIST_HEADING = "LIST OF EMPLOYEES"
MSG_ADD_BUTTON = "Add Employee"
MSG_UPDATE_BUTTON = "Update"
MSG_DELETE_BUTTON = "Delete"

# --- Form Page ---
MSG_FORM_HEADING_ADD = "ADD EMPLOYEE"
MSG_FORM_HEADING_UPDATE = "UPDATE EMPLOYEE"
MSG_SUBMIT_BUTTON = "Submit"

# --- Validation ---
MSG_FIRST_NAME_REQUIRED = "First Name is Required"
MSG_LAST_NAME_REQUIRED = "Last Name is Required"
MSG_EMAIL_REQUIRED = "Email Id is Required"
