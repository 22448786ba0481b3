from railway_booking.cli import main

raise SystemExit(main())
