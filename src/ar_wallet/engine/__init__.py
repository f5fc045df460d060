"""Engine — draft finalization and the services it depends on."""
