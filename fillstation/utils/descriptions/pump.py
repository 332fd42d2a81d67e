pump_tag_description = "Pumps, fuel prices and daily sales."

create_pump_description = (
    """
    **Adding a pump to a tank.**<br>
    <br>
    When the title is omitted the pump is named "Pump N", where N is the number of pumps
    the tank has plus one.
    """
)

get_pumps_description = "Pumps of all tanks of the station."

edit_pump_description = (
    """
    **Editing a pump.**<br>
    <br>
    **daily_ltr_sales** replaces the stored daily sales. Every entry needs a date, the liters sold
    and the price per liter, none of them negative.
    """
)

delete_pump_description = "Deleting a pump with its daily sales. Titles of other pumps are not changed."

set_prices_description = (
    """
    **Setting fuel prices.**<br>
    <br>
    Sets the price per liter on every pump of every tank of the given fuel type. Fuel types are
    matched regardless of case. All prices are applied together or not at all.
    """
)

sales_summary_description = "Liters sold and revenue by fuel type, computed from the daily sales of the pumps."
