from .parse import main

raise SystemExit(main())
