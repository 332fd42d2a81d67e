staff_tag_description = "Staff accounts of the station."

get_me_description = "Profile of the logged in staff member."

create_staff_description = (
    """
    **Creating a staff account.**<br>
    <br>
    The new staff member joins the station of the manager.<br>
    <br>
    **role** - one of manager, supervisor, accountant, cashier, attendant.<br>
    **password** - attendants need at least 6 characters including a number, other roles
    at least 8 characters including an uppercase letter, a number and a special character.
    """
)

get_staff_list_description = "Staff of the station."

edit_staff_description = "Editing of a staff account. Only the fields present in the request are changed."

delete_staff_description = "Deleting a staff account. Managers can not delete their own account."
