"""``txnguard check`` subcommands and the Click context they share."""
