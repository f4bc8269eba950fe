"""Descriptor documents shared by the tests."""

THING_XML = """<?xml version="1.0" encoding="UTF-8"?>
<thing:thing-descriptions bindingId="acme"
    xmlns:thing="http://eclipse.org/smarthome/schemas/thing-description/v1.0.0">
    <thing-type id="thermostat">
        <label>Thermostat</label>
    </thing-type>
</thing:thing-descriptions>
"""

BINDING_XML = """<?xml version="1.0" encoding="UTF-8"?>
<binding:binding id="acme"
    xmlns:binding="http://eclipse.org/smarthome/schemas/binding/v1.0.0">
    <name>ACME Binding</name>
</binding:binding>
"""

CONFIG_XML = """<?xml version="1.0" encoding="UTF-8"?>
<config-description:config-descriptions
    xmlns:config-description="http://eclipse.org/smarthome/schemas/config-description/v1.0.0">
    <config-description uri="thing-type:acme:thermostat"/>
</config-description:config-descriptions>
"""


