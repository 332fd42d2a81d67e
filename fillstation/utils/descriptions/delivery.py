delivery_tag_description = "Fuel deliveries to the station tanks."

create_delivery_description = (
    """
    **Registering a delivery.**<br>
    <br>
    The delivery is rejected when the tank can not take the quantity. A delivery registered
    as **Completed** fills the tank immediately.
    """
)

get_deliveries_description = "Deliveries of the station with the title and fuel type of their tanks."

edit_delivery_description = (
    """
    **Editing a delivery.**<br>
    <br>
    Status transitions: Pending -> Completed, Pending -> Cancelled. Completed and Cancelled are final.<br>
    Completing a delivery adds its quantity to the tank once. The request is rejected when the
    tank can not take the quantity.
    """
)

delete_delivery_description = "Deleting a delivery. Completed deliveries can not be deleted."
